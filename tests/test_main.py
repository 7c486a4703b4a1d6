"""Tests for the command-line entry point."""

from unittest.mock import MagicMock, patch

from core.errors import RemoteError
from core.state import PipelineState, StageResult, FileOutcome
from main import main

REPORT = "Main purpose/goal: Blog about urban gardening\nTarget audience: City dwellers"


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


def test_list_stages(capsys):
    assert main(["list-stages"]) == 0
    out = capsys.readouterr().out
    assert "parse-requirements" in out
    assert "finalize-website" in out


def test_dry_run_prints_identity(capsys):
    assert main(["build", "--text", REPORT, "--dry-run"]) == 0
    out = capsys.readouterr().out
    assert "Project:   blog-about-urban" in out
    assert "Audience:  City dwellers" in out


def test_report_file(tmp_path, capsys):
    path = tmp_path / "report.txt"
    path.write_text(REPORT, encoding="utf-8")
    assert main(["build", "--report", str(path), "--dry-run"]) == 0
    assert "blog-about-urban" in capsys.readouterr().out


def test_build_prints_summary(capsys):
    state = PipelineState(requirements=REPORT, project_name="blog-about-urban")
    state.repository_url = "https://github.com/octo/blog-about-urban"
    state.status = "done"
    state.stages.append(StageResult(stage="generate-structure", files=[
        FileOutcome(path="src/App.tsx", action="created"),
        FileOutcome(path="public/images/logo.svg", action="failed", error="x"),
    ]))
    with patch("main.Orchestrator") as MockOrch:
        MockOrch.return_value.run_full.return_value = state
        assert main(["build", "--text", REPORT]) == 0
    out = capsys.readouterr().out
    assert "https://github.com/octo/blog-about-urban" in out
    assert "[generate-structure] 1 written, 1 failed" in out
    assert "FAILED public/images/logo.svg" in out


def test_pipeline_error_exit_code(capsys):
    with patch("main.Orchestrator") as MockOrch:
        MockOrch.return_value.run_full.side_effect = RemoteError(
            "name already exists", stage="create-repository",
        )
        assert main(["build", "--text", REPORT]) == 2
    assert "Pipeline failed: [create-repository] name already exists" in capsys.readouterr().err


def test_send_report(tmp_path, capsys):
    path = tmp_path / "report.txt"
    path.write_text(REPORT, encoding="utf-8")
    sender = MagicMock()
    sender.send.return_value = {"success": True, "message_id": "em_9", "error": None}
    with patch("main.EmailSender", return_value=sender):
        assert main(["send-report", "--to", "a@example.com", "--report", str(path)]) == 0
    sender.send.assert_called_once_with("a@example.com", REPORT, subject=None, recipient_name=None)
    assert "em_9" in capsys.readouterr().out


def test_send_report_failure(tmp_path, capsys):
    path = tmp_path / "report.txt"
    path.write_text(REPORT, encoding="utf-8")
    sender = MagicMock()
    sender.send.return_value = {"success": False, "message_id": None, "error": "no key"}
    with patch("main.EmailSender", return_value=sender):
        assert main(["send-report", "--to", "a@example.com", "--report", str(path)]) == 1
    assert "no key" in capsys.readouterr().err


def test_bad_timeout_exit_code(monkeypatch, capsys):
    monkeypatch.setenv("GITHUB_TOKEN", "t")
    monkeypatch.setenv("HTTP_TIMEOUT", "30s")
    assert main(["build", "--text", REPORT]) == 2
    assert "Pipeline failed: [create-repository] HTTP_TIMEOUT" in capsys.readouterr().err
