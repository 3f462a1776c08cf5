"""Culture CLI commands."""

import argparse

from skyculture_engine.culture.classification import classification_style
from skyculture_engine.culture.record import BoundariesKind, ClassificationKind
from skyculture_engine.culture.registry import SkyCultureRegistry
from skyculture_engine.i18n import Translator
from skyculture_engine.settings import SettingsStore


def _open_registry(args: argparse.Namespace) -> SkyCultureRegistry:
    return SkyCultureRegistry(
        root=args.root,
        settings=SettingsStore(args.settings),
        translator=Translator(args.lang),
    )


def cmd_culture_list(args: argparse.Namespace) -> int:
    registry = _open_registry(args)
    if not len(registry):
        print(f"No sky cultures found in {args.root}")
        return 0

    if args.localized:
        for name in registry.localized_names():
            print(f"  {name}")
        return 0

    print(f"\n  {'ID':<25} {'Name':<30} {'Classification':<14}")
    print(f"  {'─' * 69}")
    for culture_id in registry:
        record = registry.get(culture_id)
        print(
            f"  {culture_id:<25} {record.english_name:<30} "
            f"{classification_style(record.classification).label:<14}"
        )
    print(f"\n  {len(registry)} sky culture(s)")
    return 0


def cmd_culture_show(args: argparse.Namespace) -> int:
    registry = _open_registry(args)
    record = registry.get(args.culture_id)
    if record is None:
        print(f"ERROR: Sky culture '{args.culture_id}' not found")
        return 1

    name = record.english_name or args.culture_id
    print(f"\n  {name}")
    print(f"  {'─' * max(len(name), 40)}")
    print(f"  {'id:':<20}{args.culture_id}")
    print(f"  {'localized:':<20}{registry.id_to_localized(args.culture_id)}")
    print(f"  {'author:':<20}{record.author}")
    print(f"  {'license:':<20}{record.license}")
    print(f"  {'boundaries:':<20}{BoundariesKind(record.boundaries).name.lower()}")
    style = classification_style(record.classification)
    print(f"  {'classification:':<20}{style.label} ({style.color})")
    print()
    return 0


def cmd_culture_describe(args: argparse.Namespace) -> int:
    registry = _open_registry(args)
    if args.culture_id is None:
        registry.init()
        culture_id = registry.current_id
    else:
        culture_id = args.culture_id

    if culture_id not in registry:
        print(f"ERROR: Sky culture '{culture_id}' not found")
        return 1
    print(registry.description_html(culture_id))
    return 0


def cmd_culture_current(args: argparse.Namespace) -> int:
    registry = _open_registry(args)
    registry.init()
    if not registry.current_id:
        print(f"ERROR: Default sky culture '{registry.default_id}' is not installed")
        return 1

    kind = ClassificationKind(registry.current_classification_idx())
    print(f"  {registry.current_id}: {registry.current_localized_name()}")
    print(f"  classification: {classification_style(kind).label}")
    return 0


def cmd_culture_set_default(args: argparse.Namespace) -> int:
    registry = _open_registry(args)
    if not registry.set_default(args.culture_id):
        print(f"ERROR: Sky culture '{args.culture_id}' not found")
        return 1
    print(f"  default sky culture: {args.culture_id}")
    print("  Settings saved.")
    return 0
