import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from . import __version__
from .env import get_settings, load_env
from .formatter import INVALID_PASS, RenderedPass, render_pass
from .logger import get_logger, reset_logger
from .schema import validate_passenger


def read_passenger(input_arg: str) -> Any:
    try:
        if input_arg == "-":
            source = "<stdin>"
            text = sys.stdin.read()
        else:
            input_path = Path(input_arg)
            source = str(input_path)
            if not input_path.exists():
                raise SystemExit(f"Input file not found: {input_path}")
            if not input_path.is_file():
                raise SystemExit(f"Input is not a file: {input_path}")
            text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SystemExit(f"Cannot read {source}: {e}")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SystemExit(f"Invalid JSON in {source}: {e}")


def passenger_from_args(args: argparse.Namespace) -> Any:
    fields = {"name": args.name, "from": args.origin, "to": args.destination, "classType": args.class_type}
    if args.input is not None:
        if any(v is not None for v in fields.values()):
            raise SystemExit("Use either --input or --name/--from/--to/--class, not both")
        return read_passenger(args.input)
    # Omitted flags become missing fields, same as an incomplete JSON record
    return {k: v for k, v in fields.items() if v is not None}


def cmd_render(args: argparse.Namespace) -> None:
    logger = get_logger()
    passenger = passenger_from_args(args)
    logger.record_pass_requested()
    result = render_pass(passenger)
    if isinstance(result, RenderedPass):
        logger.record_pass_rendered(result.passenger.class_type)
        logger.info("Rendered pass", pass_id=result.pass_id)
        print(result.text)
        return
    logger.record_pass_rejected(result.reason)
    logger.warning("Rejected passenger", reason=result.reason, field=result.field)
    print(INVALID_PASS)
    raise SystemExit(2)


def cmd_validate(args: argparse.Namespace) -> None:
    passenger = read_passenger(args.input)
    errors = validate_passenger(passenger)
    if errors:
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    print("Valid")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="localpass", description="Mumbai local train pass generator")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    ren = subparsers.add_parser("render", help="Render a pass from a passenger JSON file or flags")
    ren.add_argument("--input", help="Path to passenger JSON input ('-' for stdin)")
    ren.add_argument("--name", help="Passenger name")
    ren.add_argument("--from", dest="origin", help="Origin station")
    ren.add_argument("--to", dest="destination", help="Destination station")
    ren.add_argument("--class", dest="class_type", help="Class: first or second")
    ren.set_defaults(func=cmd_render)

    val = subparsers.add_parser("validate", help="List every problem with a passenger JSON record")
    val.add_argument("--input", required=True, help="Path to passenger JSON input ('-' for stdin)")
    val.set_defaults(func=cmd_validate)
    return parser


def main(argv: Optional[List[str]] = None):
    load_env()
    settings = get_settings()
    reset_logger()
    logger = get_logger(
        level=settings.log_level,
        log_dir=settings.log_dir,
        enable_file=settings.log_dir is not None,
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        try:
            args.func(args)
        finally:
            logger.log_metrics_summary()
        return

    parser.print_help()


if __name__ == "__main__":
    main()
