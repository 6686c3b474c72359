"""
Tests for the Typer CLI.

Generation runs with --no-ai or without a key, so no network access is needed.
The clipboard is replaced so tests work on headless machines.
"""

import json
from pathlib import Path
from typing import List

import pytest
from typer.testing import CliRunner

from voxprompt.main import app

runner = CliRunner()

TRANSCRIPT = "Create a Python script that parses CSV files and writes a summary report. It must run on Windows."


@pytest.fixture(autouse=True)
def fake_clipboard(monkeypatch: pytest.MonkeyPatch) -> List[str]:
    """Capture clipboard writes instead of touching the system clipboard."""
    copied: List[str] = []
    monkeypatch.setattr("voxprompt.main.pyperclip.copy", copied.append)
    for var in ("OPENAI_API_KEY", "VP_DEBUG", "VP_ENV_FILE"):
        monkeypatch.delenv(var, raising=False)
    return copied


class TestGenerateCommand:
    """Test `voxprompt generate`."""

    def test_markdown_output(self, fake_clipboard: List[str]):
        """Markdown output prints the raw prompt and copies it."""
        result = runner.invoke(app, ["generate", "--text", TRANSCRIPT, "--template", "coding", "--format", "markdown", "--no-ai"])
        assert result.exit_code == 0, result.output
        assert "## Goal" in result.output
        assert "## Requirements & Constraints" in result.output
        assert fake_clipboard and fake_clipboard[-1].startswith("You are")

    def test_json_output(self):
        """JSON output contains the prompt and its metadata."""
        result = runner.invoke(app, ["generate", "-t", TRANSCRIPT, "-m", "chatgpt", "-v", "short", "-f", "json", "--no-ai"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["metadata"]["model_target"] == "chatgpt"
        assert data["metadata"]["verbosity"] == "short"
        assert data["metadata"]["used_ai"] is False
        assert "## Goal" in data["prompt"]

    def test_rich_output(self):
        """Rich output shows the prompt panel and the transcript analysis."""
        result = runner.invoke(app, ["generate", "--text", TRANSCRIPT, "--no-ai"])
        assert result.exit_code == 0, result.output
        assert "Generated Prompt" in result.output
        assert "Transcript Analysis" in result.output

    def test_without_key_falls_back(self):
        """Without --no-ai and without a key the deterministic builder is used."""
        result = runner.invoke(app, ["generate", "--text", TRANSCRIPT, "--format", "json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["metadata"]["used_ai"] is False

    def test_portuguese(self):
        """--language pt renders Portuguese headings."""
        result = runner.invoke(app, ["generate", "--text", TRANSCRIPT, "--language", "pt", "--format", "markdown", "--no-ai"])
        assert result.exit_code == 0, result.output
        assert "## Objetivo" in result.output

    def test_from_file(self, tmp_path: Path):
        """The transcript can be read from a file."""
        transcript_file = tmp_path / "notes.txt"
        transcript_file.write_text(TRANSCRIPT, encoding="utf-8")
        result = runner.invoke(app, ["generate", "--file", str(transcript_file), "--format", "markdown", "--no-ai"])
        assert result.exit_code == 0, result.output
        assert "parses CSV files" in result.output

    def test_missing_file(self, tmp_path: Path):
        """A missing transcript file exits with status 1."""
        result = runner.invoke(app, ["generate", "--file", str(tmp_path / "missing.txt"), "--no-ai"])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_text_and_file_conflict(self, tmp_path: Path):
        """--text and --file together are rejected."""
        result = runner.invoke(app, ["generate", "--text", TRANSCRIPT, "--file", str(tmp_path / "x.txt")])
        assert result.exit_code == 1
        assert "Cannot specify both" in result.output

    def test_no_input(self):
        """One of --text or --file is required."""
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 1
        assert "Must specify either" in result.output

    def test_short_transcript_rejected(self):
        """Validation errors are reported per field."""
        result = runner.invoke(app, ["generate", "--text", "   too short  ", "--no-ai"])
        assert result.exit_code == 1
        assert "transcript" in result.output

    def test_unknown_template_rejected(self):
        """Unknown option values fail validation."""
        result = runner.invoke(app, ["generate", "--text", TRANSCRIPT, "--template", "poetry", "--no-ai"])
        assert result.exit_code == 1
        assert "template" in result.output

    def test_clipboard_failure_ignored(self, monkeypatch: pytest.MonkeyPatch):
        """A broken clipboard does not fail the command."""

        def broken_copy(_text):
            raise RuntimeError("no clipboard")

        monkeypatch.setattr("voxprompt.main.pyperclip.copy", broken_copy)
        result = runner.invoke(app, ["generate", "--text", TRANSCRIPT, "--format", "markdown", "--no-ai"])
        assert result.exit_code == 0, result.output


class TestExtractCommand:
    """Test `voxprompt extract`."""

    def test_json(self):
        """JSON output is the ExtractedData model."""
        result = runner.invoke(app, ["extract", "--text", TRANSCRIPT, "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["primary_intent"] == "create"
        assert data["output_type"] == "code"
        assert data["constraints"] == ["must run on Windows"]
        assert data["word_count"] == len(TRANSCRIPT.split())

    def test_rich(self):
        """Rich output shows a summary table."""
        result = runner.invoke(app, ["extract", "--text", TRANSCRIPT])
        assert result.exit_code == 0, result.output
        assert "Intent" in result.output
        assert "create" in result.output


class TestTemplatesCommand:
    """Test `voxprompt templates`."""

    def test_lists_all_templates(self):
        """Every template id is listed."""
        result = runner.invoke(app, ["templates"])
        assert result.exit_code == 0, result.output
        for template_id in ("general", "coding", "marketing", "meeting", "support", "research"):
            assert template_id in result.output
