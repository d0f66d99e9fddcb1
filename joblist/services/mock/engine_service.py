"""In-memory stand-in for the transfer engine's list endpoint."""

import logging
from uuid import UUID

from fastapi import HTTPException
from pydantic import BaseModel, Field

from joblist.models.transfer import TransferStatus
from joblist.schemas.query import ListQuery
from joblist.schemas.report import (
    FailedTransfer,
    JobIdList,
    ProgressSummary,
    Report,
    ReportKind,
    TransferDetail,
    TransferDetailList,
)

logger = logging.getLogger(__name__)


class MockTransfer(BaseModel):
    source: str
    destination: str
    status: TransferStatus = TransferStatus.IN_PROGRESS


class MockJob(BaseModel):
    job_id: UUID
    transfers: list[MockTransfer] = Field(default_factory=list)
    # False while the engine is still receiving parts of the job
    fully_ordered: bool = True


def sample_jobs() -> list[MockJob]:
    return [
        MockJob(
            job_id=UUID("3f1c2a4e-8a9b-4c5d-9e0f-1a2b3c4d5e6f"),
            transfers=[
                MockTransfer(source="/data/a.bin", destination="https://acct.blob/c/a.bin",
                             status=TransferStatus.COMPLETE),
                MockTransfer(source="/data/b.bin", destination="https://acct.blob/c/b.bin",
                             status=TransferStatus.FAILED),
                MockTransfer(source="/data/c.bin", destination="https://acct.blob/c/c.bin"),
            ],
        ),
        MockJob(
            job_id=UUID("9d8e7f60-5a4b-4c3d-8e2f-0a1b2c3d4e5f"),
            transfers=[
                MockTransfer(source="/logs/day1.log", destination="https://acct.blob/logs/day1.log"),
            ],
            fully_ordered=False,
        ),
    ]


class MockEngineService:
    def __init__(self, jobs: list[MockJob] | None = None):
        self.jobs: dict[UUID, MockJob] = {
            job.job_id: job for job in (sample_jobs() if jobs is None else jobs)
        }

    def answer(self, query: ListQuery) -> Report:
        kind = query.report_kind
        if kind is ReportKind.JOB_LIST:
            return JobIdList(job_ids=list(self.jobs))

        job = self.jobs.get(query.job_id)
        if job is None:
            raise HTTPException(status_code=404, detail=f"Job {query.job_id} not found")

        if kind is ReportKind.PROGRESS_SUMMARY:
            return self._summarize(job)
        return self._transfers_of_status(job, query.expected_status)

    def _summarize(self, job: MockJob) -> ProgressSummary:
        total = len(job.transfers)
        completed = sum(1 for t in job.transfers if t.status is TransferStatus.COMPLETE)
        failed = [t for t in job.transfers if t.status is TransferStatus.FAILED]
        return ProgressSummary(
            total_transfers=total,
            completed_transfers=completed,
            failed_transfers=len(failed),
            job_fully_ordered=job.fully_ordered,
            percent_progress=(completed / total * 100) if total else 0.0,
            failed_transfer_records=[
                FailedTransfer(source=t.source, destination=t.destination) for t in failed
            ],
        )

    def _transfers_of_status(self, job: MockJob, status: TransferStatus) -> TransferDetailList:
        matching = [
            t for t in job.transfers if status is TransferStatus.ANY or t.status is status
        ]
        logger.info(f"Job {job.job_id}: {len(matching)} transfers with status {status.label}")
        return TransferDetailList(
            records=[
                TransferDetail(source=t.source, destination=t.destination, status=int(t.status))
                for t in matching
            ]
        )
