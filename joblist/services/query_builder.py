"""Turns command-line job id and status text into a ListQuery."""

import logging
import re
from uuid import UUID

from joblist.core.errors import MalformedIdentifier
from joblist.models.transfer import TransferStatus
from joblist.schemas.query import ListQuery

logger = logging.getLogger(__name__)

_CANONICAL_UUID = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)


def build_query(job_id_text: str, status_text: str) -> ListQuery:
    """
    Build the list query for a job id and an optional status filter.

    An empty job id lists every job; an empty status asks for the job's
    progress summary. Raises MalformedIdentifier before anything is sent.
    """
    job_id = None
    if job_id_text:
        if not _CANONICAL_UUID.fullmatch(job_id_text):
            raise MalformedIdentifier("job id", job_id_text, "not a UUID")
        job_id = UUID(job_id_text)

    expected_status = None
    if status_text:
        try:
            expected_status = TransferStatus.from_name(status_text)
        except ValueError as exc:
            raise MalformedIdentifier("transfer status", status_text, str(exc)) from None

    query = ListQuery(job_id=job_id, expected_status=expected_status)
    logger.debug(f"Built {query.report_kind.value} query: {query.to_command()}")
    return query
