"""The list query sent to the transfer engine."""

import json
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from joblist.models.transfer import NO_STATUS_FILTER, TransferStatus
from joblist.schemas.report import ReportKind, report_kind_for


class ListCommand(BaseModel):
    """Wire form of a list query, as carried in the ``command`` parameter."""

    model_config = ConfigDict(populate_by_name=True)

    # JSON-encoded UUID, or "" for every job
    job_id: str = Field(alias="JobId")
    expected_transfer_status: int = Field(alias="ExpectedTransferStatus", ge=0, le=NO_STATUS_FILTER)


class ListQuery(BaseModel):
    """
    A list request for the transfer engine.

    ``job_id=None`` asks for every job and ``expected_status=None`` asks for
    the progress summary instead of a filtered transfer list. The empty string
    and 255 sentinels only appear in the wire form.
    """

    model_config = ConfigDict(frozen=True)

    job_id: UUID | None = None
    expected_status: TransferStatus | None = None

    @property
    def report_kind(self) -> ReportKind:
        return report_kind_for(self.job_id is not None, self.expected_status is not None)

    def to_command(self) -> str:
        command = ListCommand(
            job_id=json.dumps(str(self.job_id)) if self.job_id is not None else "",
            expected_transfer_status=(
                NO_STATUS_FILTER if self.expected_status is None else int(self.expected_status)
            ),
        )
        return command.model_dump_json(by_alias=True)

    @classmethod
    def from_command(cls, raw: str | bytes) -> "ListQuery":
        """Decode the ``command`` parameter. Raises ValueError when it is malformed."""
        command = ListCommand.model_validate_json(raw)

        job_id = None
        if command.job_id:
            try:
                job_id = UUID(json.loads(command.job_id))
            except (AttributeError, TypeError, ValueError) as exc:
                raise ValueError(f"JobId is not a JSON-encoded UUID: {command.job_id!r}") from exc

        expected_status = None
        if command.expected_transfer_status != NO_STATUS_FILTER:
            expected_status = TransferStatus(command.expected_transfer_status)

        return cls(job_id=job_id, expected_status=expected_status)
