"""Response schemas returned by the transfer engine for a list query."""

import enum
from typing import ClassVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from joblist.models.transfer import status_label


class ReportKind(str, enum.Enum):
    JOB_LIST = "job list"
    PROGRESS_SUMMARY = "progress summary"
    TRANSFER_LIST = "transfer list"


def report_kind_for(has_job_id: bool, has_status_filter: bool) -> ReportKind:
    """Pick the report shape from what was asked, never from what came back."""
    if not has_job_id:
        return ReportKind.JOB_LIST
    if not has_status_filter:
        return ReportKind.PROGRESS_SUMMARY
    return ReportKind.TRANSFER_LIST


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class JobIdList(_WireModel):
    kind: ClassVar[ReportKind] = ReportKind.JOB_LIST

    job_ids: list[UUID] = Field(alias="JobIds")

    @field_validator("job_ids", mode="before")
    @classmethod
    def null_job_ids_as_empty(cls, value):
        # The engine encodes an empty list as null
        return [] if value is None else value


class FailedTransfer(_WireModel):
    source: str = Field(alias="Src")
    destination: str = Field(alias="Dst")


class ProgressSummary(_WireModel):
    kind: ClassVar[ReportKind] = ReportKind.PROGRESS_SUMMARY

    total_transfers: int = Field(alias="TotalNumberOfTransfer", ge=0)
    completed_transfers: int = Field(alias="TotalNumberofTransferCompleted", ge=0)
    failed_transfers: int = Field(alias="TotalNumberofFailedTransfer", ge=0)
    job_fully_ordered: bool = Field(alias="CompleteJobOrdered")
    percent_progress: float = Field(alias="PercentageProgress", ge=0, le=100)
    failed_transfer_records: list[FailedTransfer] = Field(alias="FailedTransfers")

    @field_validator("failed_transfer_records", mode="before")
    @classmethod
    def null_failed_as_empty(cls, value):
        return [] if value is None else value

    @model_validator(mode="after")
    def check_counts_within_total(self) -> "ProgressSummary":
        if self.completed_transfers > self.total_transfers:
            raise ValueError("completed transfers exceed total transfers")
        if self.failed_transfers > self.total_transfers:
            raise ValueError("failed transfers exceed total transfers")
        return self


class TransferDetail(_WireModel):
    source: str = Field(alias="Src")
    destination: str = Field(alias="Dst")
    status: int | str = Field(alias="TransferStatus")

    @property
    def status_label(self) -> str:
        return status_label(self.status)


class TransferDetailList(_WireModel):
    kind: ClassVar[ReportKind] = ReportKind.TRANSFER_LIST

    records: list[TransferDetail] = Field(alias="Details")

    @field_validator("records", mode="before")
    @classmethod
    def null_details_as_empty(cls, value):
        return [] if value is None else value


Report = JobIdList | ProgressSummary | TransferDetailList

REPORT_SCHEMAS: dict[ReportKind, type[BaseModel]] = {
    ReportKind.JOB_LIST: JobIdList,
    ReportKind.PROGRESS_SUMMARY: ProgressSummary,
    ReportKind.TRANSFER_LIST: TransferDetailList,
}
