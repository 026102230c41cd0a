"""Command line entry point: analyze a trace file and print the shock report."""

import argparse
from pathlib import Path

import pydantic

from . import constants
from ._logging import logger, set_log_file, set_log_level
from .config import ConfigLoader, Settings
from .core import AEDAnalyzer
from .io import TraceFormatError
from .report import format_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aed-ecg",
        description="Decide whether an AED should shock, from a recorded single-lead ECG trace",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=constants.DEFAULT_INPUT_FILE,
        help=f"Trace file with 'timestamp amplitude is_peak' records (default: {constants.DEFAULT_INPUT_FILE})",
    )
    parser.add_argument("--config", type=Path, help="JSON or TOML settings file")
    parser.add_argument(
        "--strict-loading",
        action="store_true",
        help="Fail on a malformed record instead of truncating the trace",
    )
    parser.add_argument(
        "--strict-sentinels",
        action="store_true",
        help="Report undefined estimates as undefined instead of 0",
    )
    parser.add_argument("--no-plot", action="store_true", help="Do not render the ECG chart")
    parser.add_argument("--plot-path", type=Path, help="Where to write the ECG chart")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    if args.strict_loading:
        settings.loader.on_malformed = "raise"
    if args.strict_sentinels:
        settings.sentinel_mode = "strict"
    if args.no_plot:
        settings.visualization.enabled = False
    if args.plot_path is not None:
        settings.visualization.output_path = args.plot_path
    return settings


def main(argv: list[str] | None = None) -> int:
    """Run the analysis and print the report.

    Returns:
        Process exit status: 0 on a completed analysis, 1 on a startup error
    """
    args = build_parser().parse_args(argv)
    set_log_level(args.log_level)
    if args.log_file is not None:
        set_log_file(args.log_file)

    print(constants.START_BANNER)
    print()

    try:
        settings = ConfigLoader.from_file(args.config) if args.config else Settings()
    except FileNotFoundError:
        print(f"ERROR: config file not found: {args.config}")
        return 1
    except OSError as e:
        print(f"ERROR: config file not readable: {args.config} ({e.strerror or e})")
        return 1
    except (ValueError, pydantic.ValidationError) as e:
        print(f"ERROR: invalid config file {args.config}: {e}")
        return 1
    settings = _apply_overrides(settings, args)

    try:
        result = AEDAnalyzer(settings).analyze_file(args.input)
    except FileNotFoundError:
        logger.error(f"Input file {args.input} not found")
        print("ERROR: input file not found")
        return 1
    except OSError as e:
        logger.error(f"Input file {args.input} could not be read: {e}")
        print(f"ERROR: input file not readable: {args.input} ({e.strerror or e})")
        return 1
    except TraceFormatError as e:
        print(f"ERROR: malformed input file: {e}")
        return 1

    for line in format_report(result):
        print(line)
    print()
    print(constants.DONE_BANNER)
    return 0
