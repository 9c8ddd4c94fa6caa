"""Ledgerwire CLI: inspect schemas and check payloads against them."""

import argparse
import json
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path


def main():
    """Main CLI entry point for ledgerwire commands."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        ledgerwire_version = get_version("ledgerwire")
    except PackageNotFoundError:
        ledgerwire_version = "dev"

    parser = argparse.ArgumentParser(
        prog="ledgerwire",
        description="Ledgerwire: typed mapping between Increase API JSON and Python models"
    )
    parser.add_argument("--version", action="version", version=f"ledgerwire {ledgerwire_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for diagnostics on stderr"
    )
    parent_parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON lines"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # models command
    subparsers.add_parser(
        "models",
        help="List registered model names",
        parents=[parent_parser]
    )

    # describe command
    describe_parser = subparsers.add_parser(
        "describe",
        help="Print the field descriptors of a model",
        parents=[parent_parser]
    )
    describe_parser.add_argument("model", help="Registered model name, e.g. ACHTransfer")

    # decode command
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a JSON payload and print it re-encoded",
        parents=[parent_parser]
    )
    decode_parser.add_argument("model", help="Registered model name")
    decode_parser.add_argument("payload", type=Path, help="Path to a JSON payload")
    decode_parser.add_argument(
        "--unknown-fields",
        choices=["preserve", "ignore", "reject"],
        default="preserve",
        help="What to do with keys the schema does not describe"
    )
    decode_parser.add_argument(
        "--strict-enums",
        action="store_true",
        help="Reject enum values the schema does not declare"
    )

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Report every problem of a JSON payload against a model",
        parents=[parent_parser]
    )
    validate_parser.add_argument("model", help="Registered model name")
    validate_parser.add_argument("payload", type=Path, help="Path to a JSON payload")
    validate_parser.add_argument(
        "--strict-enums",
        action="store_true",
        help="Report enum values the schema does not declare"
    )

    # schema command
    schema_parser = subparsers.add_parser(
        "schema",
        help="Dump the registered schema document",
        parents=[parent_parser]
    )
    schema_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the document to a file instead of stdout"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    from .observability import setup_logging
    setup_logging(args.log_level, json_output=args.log_json)

    # Lazy import: only load the schema registry when a command runs
    from . import api
    from ._internal.canonical_json import canonical_dumps, load_json
    from .errors import ConfigurationError, DecodeError
    from .kernel import CodecOptions

    def _emit(payload) -> None:
        if not args.quiet:
            print(canonical_dumps(payload, indent=2))

    try:
        if args.command == "models":
            if not args.quiet:
                for name in api.list_models():
                    print(name)
            sys.exit(0)

        if args.command == "describe":
            _emit(api.describe(args.model))
            sys.exit(0)

        if args.command == "decode":
            options = CodecOptions(
                unknown_fields=args.unknown_fields,
                unknown_enums="reject" if args.strict_enums else "preserve",
            )
            instance = api.decode(args.model, load_json(args.payload), options=options)
            _emit(api.encode(instance))
            sys.exit(0)

        if args.command == "validate":
            result = api.validate(args.model, load_json(args.payload), strict_enums=args.strict_enums)
            _emit(result.model_dump(mode="json"))
            sys.exit(0 if result.ok else 1)

        if args.command == "schema":
            from .kernel import default_registry, dump_schema

            document = dump_schema(default_registry())
            if args.out is not None:
                args.out.parent.mkdir(parents=True, exist_ok=True)
                args.out.write_text(canonical_dumps(document, indent=2) + "\n", encoding="utf-8")
                if not args.quiet:
                    print(f"[OK] Schema written to {args.out}")
            else:
                _emit(document)
            sys.exit(0)
    except DecodeError as e:
        print(f"Decode error: {e}", file=sys.stderr)
        sys.exit(1)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
