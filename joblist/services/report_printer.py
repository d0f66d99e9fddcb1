"""Text rendering for the three list reports."""

from uuid import UUID

from joblist.schemas.report import (
    JobIdList,
    ProgressSummary,
    Report,
    ReportKind,
    TransferDetailList,
)


def _render_job_list(report: JobIdList, job_id: UUID | None) -> list[str]:
    return ["Existing Jobs"] + [str(existing) for existing in report.job_ids]


def _render_progress_summary(report: ProgressSummary, job_id: UUID | None) -> list[str]:
    lines = [
        f"--------------- Progress Summary for Job {job_id} ---------------",
        f"Total Number of Transfer {report.total_transfers}",
        f"Total Number of Transfer Completed {report.completed_transfers}",
        f"Total Number of Transfer Failed {report.failed_transfers}",
        f"Has the final part been ordered {str(report.job_fully_ordered).lower()}",
        f"Progress of Job in terms of Percentage {report.percent_progress}",
    ]
    for index, failed in enumerate(report.failed_transfer_records):
        lines.append(f"transfer-{index}\tsource: {failed.source}\tdestination: {failed.destination}")
    return lines


def _render_transfer_list(report: TransferDetailList, job_id: UUID | None) -> list[str]:
    lines = [f"----------- Transfers for JobId {job_id} -----------"]
    for record in report.records:
        lines.append(
            f"transfer--> source: {record.source} destination: {record.destination} "
            f"status {record.status_label}"
        )
    return lines


_RENDERERS = {
    ReportKind.JOB_LIST: _render_job_list,
    ReportKind.PROGRESS_SUMMARY: _render_progress_summary,
    ReportKind.TRANSFER_LIST: _render_transfer_list,
}


def render_report(report: Report, job_id: UUID | None = None) -> list[str]:
    """Return the report's lines; ``job_id`` names the job in the header."""
    return _RENDERERS[report.kind](report, job_id)
