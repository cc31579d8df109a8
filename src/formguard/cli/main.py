"""CLI entrypoint for formguard."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from formguard import __version__
from formguard.binder import bind
from formguard.codes import MessageCodesResolver
from formguard.config import load_config
from formguard.constants.branding import CLI_DESCRIPTION, GLOBAL_SCOPE_LABEL
from formguard.constants.item import ITEM_OBJECT_NAME
from formguard.domain import Item
from formguard.exceptions import CatalogError, ConfigError, FormguardError
from formguard.validation import ItemValidator, invoke_validator


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="formguard", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate item input and print error messages")
    validate.add_argument("-n", "--item-name", default=None, help="Item name")
    validate.add_argument("-p", "--price", default=None, help="Price (raw input, converted to an integer)")
    validate.add_argument("-q", "--quantity", default=None, help="Quantity (raw input, converted to an integer)")
    validate.add_argument("-l", "--locale", default=None, help="Message locale, e.g. ko or en (default: from config)")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding formguard.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    validate.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    codes = subparsers.add_parser("codes", help="Print the message codes resolved for an error")
    codes.add_argument("error_code", help="Error code, e.g. required")
    codes.add_argument("object_name", help="Object name, e.g. item")
    codes.add_argument("field", nargs="?", default=None, help="Field name for field errors")
    codes.add_argument("-t", "--type", dest="field_type", default=None, help="Declared field type name")
    codes.add_argument("--prefix", default="", help="Prefix prepended to every code")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "codes":
        return _handle_codes(args)
    if args.command != "validate":
        parser.error(f"Unsupported command: {args.command}")

    try:
        return _handle_validate(args)
    except (ConfigError, CatalogError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except FormguardError as exc:
        print(f"formguard error: {exc}", file=sys.stderr)
        return 1


def _handle_validate(args: argparse.Namespace) -> int:
    """Bind the raw input, run the item rules and print one line per violation."""
    config = load_config(args.root, args.config)
    renderer = config.build_renderer(args.locale)

    form = {
        name: value
        for name, value in (
            ("item_name", args.item_name),
            ("price", args.price),
            ("quantity", args.quantity),
        )
        if value is not None
    }
    result = bind(form, Item, ITEM_OBJECT_NAME, resolver=config.build_resolver())
    invoke_validator(ItemValidator(), result.target, result.errors)

    if not result.errors.has_errors():
        print("OK")
        return 0

    for violation in result.errors.violations:
        label = violation.field if violation.field is not None else GLOBAL_SCOPE_LABEL
        print(f"[{label}] {renderer.render_violation(violation)}")
    return 1


def _handle_codes(args: argparse.Namespace) -> int:
    """Print resolved message codes, most specific first."""
    resolver = MessageCodesResolver(prefix=args.prefix)
    if args.field is None:
        codes = resolver.resolve_object_codes(args.error_code, args.object_name)
    else:
        codes = resolver.resolve_field_codes(args.error_code, args.object_name, args.field, args.field_type)
    for code in codes:
        print(code)
    return 0


if __name__ == "__main__":
    sys.exit(main())
