"""HTTP client for the transfer engine's list endpoint."""

import logging

import httpx
from pydantic import ValidationError

from joblist.config import settings
from joblist.core.errors import EngineRejected, MalformedResponse, TransportFailure
from joblist.schemas.query import ListQuery
from joblist.schemas.report import REPORT_SCHEMAS, Report, ReportKind

logger = logging.getLogger(__name__)

LIST_REQUEST_TYPE = "list"


def decode_report(kind: ReportKind, body: bytes) -> Report:
    """Decode a response body with the schema for ``kind``."""
    try:
        return REPORT_SCHEMAS[kind].model_validate_json(body)
    except ValidationError as exc:
        raise MalformedResponse(kind.value, str(exc)) from exc


class EngineClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        self.base_url = (base_url or settings.engine_url).rstrip("/")
        if client is None:
            client = httpx.Client(
                base_url=self.base_url,
                timeout=timeout if timeout is not None else settings.engine_timeout,
            )
        self._client = client

    def dispatch(self, query: ListQuery) -> Report:
        """
        Send a list query and decode the engine's answer.

        The report shape follows ``query.report_kind``. Raises TransportFailure,
        EngineRejected or MalformedResponse; nothing is retried.
        """
        params = {"Type": LIST_REQUEST_TYPE, "command": query.to_command()}
        kind = query.report_kind
        logger.info(f"Requesting {kind.value} from {self.base_url}")

        try:
            with self._client.stream("GET", "/", params=params) as response:
                if response.status_code != httpx.codes.ACCEPTED:
                    logger.error(
                        f"Engine rejected list request: {response.status_code} {response.reason_phrase}"
                    )
                    raise EngineRejected(response.status_code, response.reason_phrase)
                body = response.read()
        except httpx.DecodingError as exc:
            raise MalformedResponse(kind.value, str(exc)) from exc
        except httpx.TransportError as exc:
            raise TransportFailure(self.base_url, str(exc) or type(exc).__name__) from exc

        return decode_report(kind, body)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "EngineClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
