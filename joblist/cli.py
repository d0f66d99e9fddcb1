"""
Command-line entry point for listing transfer-engine jobs.

    joblist                                 list every job
    joblist --job-id ID                     progress summary of a job
    joblist --job-id ID --of-status NAME    transfers of a job with a status

Exit status is 0 when the report was printed and 1 otherwise.
"""

import argparse
import logging
import sys
from typing import get_args

from joblist.config import Settings, settings
from joblist.core.errors import ListCommandError
from joblist.core.logging import configure_logging
from joblist.models.transfer import STATUS_NAMES
from joblist.services.engine_client import EngineClient
from joblist.services.query_builder import build_query
from joblist.services.report_printer import render_report

logger = logging.getLogger(__name__)

LOG_LEVELS = get_args(Settings.model_fields["log_level"].annotation)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="joblist",
        description="List jobs and transfers known to the local transfer engine.",
    )
    parser.add_argument("--job-id", default="", help="job to inspect (default: list every job)")
    parser.add_argument(
        "--of-status",
        default="",
        help=f"only list transfers with this status: {', '.join(STATUS_NAMES)}",
    )
    parser.add_argument("--engine-url", default=None, help=f"engine address (default: {settings.engine_url})")
    parser.add_argument("--timeout", type=float, default=None, help="seconds to wait for the engine")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
    )
    return parser


def run_list(job_id_text: str, status_text: str, client: EngineClient) -> list[str]:
    """Build, send and render one list query. Raises ListCommandError."""
    query = build_query(job_id_text, status_text)
    report = client.dispatch(query)
    return render_report(report, query.job_id)


def main(argv: list[str] | None = None, client: EngineClient | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    owned = client is None
    if owned:
        client = EngineClient(base_url=args.engine_url, timeout=args.timeout)

    try:
        lines = run_list(args.job_id, args.of_status, client)
    except ListCommandError as e:
        logger.debug("list command aborted", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        if owned:
            client.close()

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
