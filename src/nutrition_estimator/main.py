"""Command-line entry point for the nutrition estimator."""

import argparse
import json
import sys
from pathlib import Path

from nutrition_estimator.app_logging import configure_logging
from nutrition_estimator.containers import AppContainer, build_container


def main(argv: list[str] | None = None, container: AppContainer | None = None) -> int:
    """Run the CLI and return a process exit code."""
    parser = argparse.ArgumentParser(
        prog="nutrition-estimator",
        description="Nutrition Estimator: turn image-recognition output into "
        "a nutrition estimate.",
    )
    sub = parser.add_subparsers(dest="command")

    analyze_parser = sub.add_parser(
        "analyze", help="Estimate nutrition from a recognizer JSON payload"
    )
    analyze_parser.add_argument(
        "payload",
        nargs="?",
        default="-",
        help="Path to a JSON file with 'objects' and 'labels' (default: stdin)",
    )

    food_parser = sub.add_parser("food", help="Show catalog values for a food")
    food_parser.add_argument("name")

    sub.add_parser("categories", help="List catalog categories")

    foods_parser = sub.add_parser("foods", help="List catalog foods")
    foods_parser.add_argument("--category", default=None)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    resolved = container or build_container()
    configure_logging(debug=resolved.settings.debug)

    if args.command == "analyze":
        return _analyze(resolved, args.payload)
    if args.command == "food":
        info = resolved.nutrition_estimator.get_food_nutrition_info(args.name)
        if info is None:
            print(f"Food not found: {args.name}", file=sys.stderr)
            return 1
        print(info.model_dump_json(indent=2))
        return 0
    if args.command == "categories":
        for category in resolved.resolver.list_categories():
            print(category)
        return 0
    if args.command == "foods":
        records = (
            resolved.resolver.list_by_category(args.category)
            if args.category
            else list(resolved.catalog)
        )
        for record in records:
            print(f"{record.key}\t{record.display_name}\t{record.category}")
        return 0
    return 0


def _analyze(container: AppContainer, source: str) -> int:
    """Analyse a payload file (or stdin) and print the result as JSON."""
    try:
        if source == "-":
            payload = json.load(sys.stdin)
        else:
            payload = json.loads(Path(source).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Could not read payload: {exc}", file=sys.stderr)
        return 2
    if not isinstance(payload, dict):
        print("Payload must be a JSON object", file=sys.stderr)
        return 2

    result = container.analysis_service.analyze_payload(payload)
    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
