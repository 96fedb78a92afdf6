"""Check values against a logical type from the command line.

    validate-values --type Integer -- 42 0123 --42
    printf 'true\\nmaybe\\n' | validate-values -t Boolean

Exit status is 0 when every value is valid and 1 otherwise.
"""
import argparse
import logging
import sys

from value_validators import VALIDATOR_TYPE_MAP, ValidatorConfig, get_validator

logger = logging.getLogger(__name__)


def _read_stdin_values() -> list[str]:
    return [line.rstrip("\r\n") for line in sys.stdin]


def main(argv: list[str] | None = None) -> int:
    config = ValidatorConfig()

    parser = argparse.ArgumentParser(description="Check values against a logical type.")
    parser.add_argument(
        "values",
        nargs="*",
        help="Values to check. Read one per line from stdin when omitted.",
    )
    parser.add_argument(
        "-t",
        "--type",
        default=config.default_type,
        help=f"Validator type: {', '.join(VALIDATOR_TYPE_MAP)} (default: {config.default_type})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=config.json_input,
        help="Decode each value as a JSON document before validating.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Print nothing; report through the exit status only.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.log_level)

    try:
        validator = get_validator(args.type)
    except ValueError as e:
        parser.error(str(e))

    values = args.values or _read_stdin_values()
    logger.info("Validating %d value(s) as %s", len(values), validator.type_name)

    all_valid = True
    for raw in values:
        valid = validator.validate_json(raw) if args.json else validator.validate(raw)
        all_valid = all_valid and valid
        if not args.quiet:
            print(f"{'valid' if valid else 'invalid'}\t{raw}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    raise SystemExit(main())
