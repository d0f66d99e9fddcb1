"""Tests for the joblist command line."""

import httpx
import pytest

from joblist.cli import main

from conftest import FIRST_JOB_ID, SECOND_JOB_ID


def test_lists_every_job(engine_client, capsys):
    assert main([], client=engine_client) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Existing Jobs", FIRST_JOB_ID, SECOND_JOB_ID]


def test_progress_summary(engine_client, capsys):
    assert main(["--job-id", FIRST_JOB_ID], client=engine_client) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"--------------- Progress Summary for Job {FIRST_JOB_ID} ---------------"
    assert out[1] == "Total Number of Transfer 3"
    assert out[-1] == "transfer-0\tsource: /data/b.bin\tdestination: https://acct.blob/c/b.bin"


def test_transfers_with_status(engine_client, capsys):
    assert main(["--job-id", FIRST_JOB_ID, "--of-status", "TransferComplete"], client=engine_client) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[1] == (
        "transfer--> source: /data/a.bin destination: https://acct.blob/c/a.bin status TransferComplete"
    )


def test_bad_job_id_aborts_before_sending(stub_engine, capsys):
    sent: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(202, json={})

    assert main(["--job-id", "nope"], client=stub_engine(handler)) == 1
    captured = capsys.readouterr()
    assert sent == []
    assert captured.out == ""
    assert "invalid job id 'nope'" in captured.err


def test_engine_rejection_prints_nothing(stub_engine, capsys):
    engine = stub_engine(lambda request: httpx.Response(500, text="boom"))
    assert main([], client=engine) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "request failed with status 500" in captured.err


def test_malformed_body_prints_nothing(stub_engine, capsys):
    engine = stub_engine(lambda request: httpx.Response(202, text="[]"))
    assert main(["--job-id", SECOND_JOB_ID], client=engine) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "progress summary" in captured.err


def test_unknown_log_level_is_a_usage_error(engine_client, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "loud"], client=engine_client)
    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid choice" in captured.err


def test_log_level_is_case_insensitive(engine_client, capsys):
    assert main(["--log-level", "debug"], client=engine_client) == 0
    assert capsys.readouterr().out.splitlines()[0] == "Existing Jobs"
