"""Tests for rendering list reports as text."""

from uuid import UUID

from joblist.schemas.report import JobIdList, ProgressSummary, TransferDetailList
from joblist.services.report_printer import render_report

JOB_ID = UUID("11111111-1111-1111-1111-111111111111")


def test_job_list_lines():
    report = JobIdList.model_validate_json('{"JobIds":["11111111-1111-1111-1111-111111111111"]}')
    assert render_report(report) == ["Existing Jobs", "11111111-1111-1111-1111-111111111111"]


def test_progress_summary_lines_in_order():
    report = ProgressSummary.model_validate(
        {
            "TotalNumberOfTransfer": 10,
            "TotalNumberofTransferCompleted": 7,
            "TotalNumberofFailedTransfer": 3,
            "CompleteJobOrdered": True,
            "PercentageProgress": 70.0,
            "FailedTransfers": [{"Src": "a", "Dst": "b"}],
        }
    )
    lines = render_report(report, JOB_ID)

    assert lines == [
        f"--------------- Progress Summary for Job {JOB_ID} ---------------",
        "Total Number of Transfer 10",
        "Total Number of Transfer Completed 7",
        "Total Number of Transfer Failed 3",
        "Has the final part been ordered true",
        "Progress of Job in terms of Percentage 70.0",
        "transfer-0\tsource: a\tdestination: b",
    ]


def test_transfer_list_lines():
    report = TransferDetailList.model_validate(
        {
            "Details": [
                {"Src": "/x", "Dst": "/y", "TransferStatus": 1},
                {"Src": "/p", "Dst": "/q", "TransferStatus": "TransferFailed"},
            ]
        }
    )
    assert render_report(report, JOB_ID) == [
        f"----------- Transfers for JobId {JOB_ID} -----------",
        "transfer--> source: /x destination: /y status TransferComplete",
        "transfer--> source: /p destination: /q status TransferFailed",
    ]


def test_empty_transfer_list_has_only_header():
    report = TransferDetailList.model_validate({"Details": None})
    assert render_report(report, JOB_ID) == [f"----------- Transfers for JobId {JOB_ID} -----------"]
