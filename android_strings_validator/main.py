"""
Main entry point for the Android Strings Validator.

Validates the translated strings files of an Android project against the
base locale and exits with the number of findings.
"""

import argparse
import logging
import sys

from .config import Config
from .errors import error_handler
from .validation import (
    RULE_NAMES,
    ValidationConfig,
    ValidationCoordinator,
    format_findings,
    format_summary,
    summarize_findings,
    exit_code,
)


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format=Config.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Validate translated Android string resources against the base locale",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --resdir app/src/main/res
  %(prog)s --resdir app/src/main/res --baselocale en --missing
  %(prog)s --resdir app/src/main/res --filename plurals.xml --disable-rule newline

Exit status:
  The number of findings (0 when no problems were found, capped at 254),
  or -1 when the arguments are invalid.
        """
    )

    parser.add_argument(
        "--resdir",
        default="",
        help="The path to the 'res' directory of your Android project"
    )

    parser.add_argument(
        "--baselocale",
        default="",
        help="The base locale used for validation of other locale strings (e.g. 'en' or 'en-rGB'); "
             "empty means the default 'values' directory"
    )

    parser.add_argument(
        "--filename",
        default=Config.DEFAULT_STRINGS_FILENAME,
        help="The name of the XML file with string resources"
    )

    parser.add_argument(
        "--missing",
        action="store_true",
        help="Show strings that exist in the base resources but not in other resources"
    )

    parser.add_argument(
        "--duplicates",
        action="store_true",
        help="Report resource names defined more than once in a translated file"
    )

    parser.add_argument(
        "--disable-rule",
        action="append",
        default=[],
        choices=RULE_NAMES,
        metavar="RULE",
        help=f"Skip a comparison rule (repeatable), one of: {', '.join(RULE_NAMES)}"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def print_error_summary():
    """Print suggestions for unreadable or malformed files to stderr."""
    error_summary = error_handler.get_error_summary()
    print(f"Files that could not be validated: {error_summary['error_count']}", file=sys.stderr)
    for error in error_summary['errors']:
        print(f"   • {error['message']}", file=sys.stderr)
        if error['suggested_actions']:
            print(f"     Suggestion: {error['suggested_actions'][0]}", file=sys.stderr)


def main(argv=None) -> int:
    """Parse arguments, run the validation and print the findings."""
    parser = build_parser()
    args = parser.parse_args(argv)

    argument_error = error_handler.validate_arguments(args.resdir, args.filename)
    if argument_error:
        parser.print_usage()
        print(f"{argument_error.message}.")
        for action in argument_error.suggested_actions:
            print(f"   • {action}")
        return -1

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)
    error_handler.clear_errors()

    config = ValidationConfig(
        show_missing=args.missing,
        report_duplicates=args.duplicates,
    )
    for rule_name in args.disable_rule:
        config.disable_rule(rule_name)
    logger.debug(f"Validation config: {config.get_config_summary()}")

    coordinator = ValidationCoordinator(config, error_handler=error_handler)
    findings = coordinator.validate(args.resdir, args.baselocale, args.filename)

    for line in format_findings(findings):
        print(line)
    print(format_summary(findings))

    if error_handler.has_errors():
        print_error_summary()

    logger.debug(f"Findings by kind: {summarize_findings(findings)}")
    return exit_code(findings)


if __name__ == "__main__":
    sys.exit(main())
