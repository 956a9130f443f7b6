"""Main entry point for the DNS check probe."""

import argparse
import logging
import sys
import time
from typing import TextIO

from src.config import Config, load_check_configs
from src.exceptions import DurationFormatError, ParseError
from src.services.check_compiler import CheckDefaults, compile_checks
from src.services.checker import Checker
from src.services.logger import log_run_summary, setup_logging
from src.services.reporter import ResultReporter


logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None, config: Config) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="DNS check probe")
    p.add_argument(
        "-c",
        "--config",
        default=config.config_file,
        help="name of the config file (env CONFIG_FILE)",
    )
    p.add_argument(
        "-e",
        "--error-reports",
        default=config.error_reports_dir,
        help="directory to write the error reports to (env ERROR_REPORTS_DIR)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=config.verbose,
        help="enable debug logging (env VERBOSE)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Main execution function.

    Args:
        argv: Command-line arguments (sys.argv[1:] if omitted).
        out: Stream for summary lines (stdout if omitted).

    Returns:
        int: Exit code (0 when the checks ran, 1 for configuration errors).
    """
    start_time = time.time()
    out = out or sys.stdout

    try:
        config = Config.from_env()
    except ValueError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        return 1

    args = parse_args(argv, config)
    setup_logging(verbose=args.verbose)
    logger.info("Starting DNS check probe")

    try:
        check_configs = load_check_configs(args.config)
    except ValueError as e:
        logger.error(f"Fatal error: {e}")
        return 1

    try:
        checks = compile_checks(
            check_configs,
            CheckDefaults(
                resolver_timeout=config.default_resolver_timeout,
                query_type=config.default_query_type,
            ),
        )
    except (ParseError, DurationFormatError) as e:
        logger.error(f"Check compilation failed: {e}", extra=e.details)
        return 1

    logger.info(f"Configuration loaded: {len(checks)} checks configured")

    results = Checker(checks).run()

    ResultReporter.write_summary(results, out)
    reports = ResultReporter.write_error_reports(results, args.error_reports)

    passed = sum(1 for r in results if r.ok())
    log_run_summary(
        total_checks=len(results),
        passed=passed,
        failed=len(results) - passed,
        reports_written=len(reports),
        duration_sec=time.time() - start_time,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
