"""jsonresin command line tool.

Repairs truncated or malformed JSON documents and writes them to stdout.

Usage:
    jsonresin response.json                 # Repair one file
    cat partial.json | jsonresin            # Repair stdin
    jsonresin a.json b.json --report        # Repair several, report to stderr
    jsonresin broken.json --indent 2 --validate
"""

import argparse
import json
import os
import sys
from dataclasses import asdict
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

from jsonresin.config import ResinConfig, load_config
from jsonresin.logger import get_logger, set_level
from jsonresin.loads import validate_json
from jsonresin.repair import repair_with_report
from jsonresin.stats import collect_stats, format_repair_report

logger = get_logger("cli")


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonresin",
        description="Repair truncated or malformed JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "files",
        nargs="*",
        help="Input files (default: stdin; '-' also reads stdin)",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="YAML configuration file (default: $JSONRESIN_CONFIG)",
    )

    parser.add_argument(
        "--indent",
        "-i",
        type=non_negative_int,
        default=None,
        help="Pretty-print output with this indent",
    )

    parser.add_argument(
        "--validate",
        action="store_true",
        default=None,
        help="Exit with status 1 if any result is empty or does not decode",
    )

    parser.add_argument(
        "--report",
        "-r",
        action="store_true",
        default=None,
        help="Print a repair report to stderr",
    )

    parser.add_argument(
        "--json",
        "-j",
        action="store_true",
        help="Print repair statistics as JSON to stderr",
    )

    return parser


def resolve_config(args: argparse.Namespace) -> ResinConfig:
    """Load the config file (if any) and apply command line overrides."""
    config_path = args.config or os.environ.get("JSONRESIN_CONFIG")
    config = load_config(config_path) if config_path else ResinConfig()

    env_level = os.environ.get("JSONRESIN_LOG_LEVEL")
    if env_level:
        config.log_level = env_level.upper()
    if args.indent is not None:
        config.indent = args.indent
    if args.validate is not None:
        config.validate = args.validate
    if args.report is not None:
        config.report = args.report
    return config


def read_input(name: str, encoding: str) -> str:
    if name == "-":
        return sys.stdin.read()
    with open(name, encoding=encoding) as f:
        return f.read()


def format_output(text: str, indent) -> str:
    if indent is None or not text:
        return text
    return json.dumps(json.loads(text), indent=indent, ensure_ascii=False)


def main(argv=None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
        set_level(config.log_level)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("config.error", error_type=type(e).__name__, error_message=str(e))
        print(f"jsonresin: {e}", file=sys.stderr)
        return 2

    results = []
    failed = False

    for name in args.files or ["-"]:
        try:
            text = read_input(name, config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "input.error",
                source=name,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            print(f"jsonresin: {name}: {e}", file=sys.stderr)
            return 2

        result = repair_with_report(text)
        results.append(result)

        logger.info(
            "repair.document",
            source=name,
            input_length=len(text),
            output_length=len(result.text),
            repairs=[kind.value for kind in result.repairs],
        )

        if result.text:
            is_valid, error = validate_json(result.text)
        else:
            is_valid, error = False, "no JSON object or array found"
        if config.validate and not is_valid:
            logger.warning("repair.invalid", source=name, error_message=error)
            print(f"jsonresin: {name}: {error}", file=sys.stderr)
            failed = True

        sys.stdout.write(format_output(result.text, config.indent if is_valid else None) + "\n")

    stats = collect_stats(results)
    if args.json:
        print(json.dumps(asdict(stats), indent=2), file=sys.stderr)
    elif config.report:
        print(format_repair_report(stats), file=sys.stderr)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
