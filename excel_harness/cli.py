#!/usr/bin/env python3
"""
Excel Online Harness CLI

Usage:
    excel-harness run                 # Run the =TODAY() scenario
    excel-harness run --env ci        # Use config/environments/ci.yaml
    excel-harness run --headed        # Show the browser window
    excel-harness env-docs            # Print the environment variable table

Exit codes: 0 pass, 1 value mismatch, 2 harness or configuration error.
"""
import argparse
import logging
import sys

from playwright.sync_api import Error as PlaywrightError

from .config import Config, ConfigError, get_env_var_docs, validate_config
from .errors import HarnessError
from .scenario import run_today_scenario
from .settings import load_settings

logger = logging.getLogger("excel_harness")

EXIT_PASSED = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


def cmd_run(args) -> int:
    """Run the scenario and report the verdict."""
    try:
        validate_config()
        settings = load_settings(args.env)
        if args.headed:
            settings.headless = False
        if args.no_video:
            settings.record_video = False
        result = run_today_scenario(settings)
    except (ConfigError, HarnessError) as e:
        logger.error(str(e))
        print(f"ERROR: {e}")
        return EXIT_ERROR
    except PlaywrightError as e:
        logger.error(f"Browser error: {e}")
        print(f"ERROR: browser: {e}")
        return EXIT_ERROR

    print(f"Cell {settings.cell} data: {result.cell_value}")
    print(f"Expected: {result.expected}")
    if result.video_path:
        print(f"Video: {result.video_path}")

    if result.passed:
        print("PASSED")
        return EXIT_PASSED
    print("FAILED")
    return EXIT_MISMATCH


def cmd_env_docs(args) -> int:
    print(get_env_var_docs())
    return EXIT_PASSED


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="excel-harness", description="End-to-end checks for Excel Online"
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command")

    # Run command
    run_parser = subparsers.add_parser("run", help="Run the =TODAY() scenario")
    run_parser.add_argument("--env", default=None, help="YAML environment overlay (local, ci)")
    run_parser.add_argument("--headed", action="store_true", help="Show the browser window")
    run_parser.add_argument("--no-video", action="store_true", help="Do not record a video")

    # Env docs command
    subparsers.add_parser("env-docs", help="Print environment variable docs")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = args.log_level or Config.LOG_LEVEL
    except ConfigError as e:
        print(f"ERROR: {e}")
        return EXIT_ERROR
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    if args.command == "run":
        return cmd_run(args)
    return cmd_env_docs(args)


if __name__ == "__main__":
    sys.exit(main())
