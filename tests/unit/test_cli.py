"""
Tests for the resilience-insights command.
"""

import json

import pytest

from resilience.cli import EXIT_BAD_INPUT, EXIT_OK, ExportFormatError, load_export, main


@pytest.fixture
def export_file(tmp_path, mixed_records):
    moods, journals, thoughts = mixed_records
    path = tmp_path / "export.json"
    path.write_text(
        json.dumps({"moodEntries": moods, "journalEntries": journals, "thoughtRecords": thoughts})
    )
    return path


class TestLoadExport:
    """Tests for export file parsing"""

    def test_camel_case_keys(self, export_file):
        streams = load_export(export_file)
        assert len(streams["mood_entries"]) == 3
        assert len(streams["journal_entries"]) == 3
        assert len(streams["thought_records"]) == 2

    def test_snake_case_keys_and_missing_lists(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text(json.dumps({"mood_entries": [{"id": 1}], "thoughtRecords": None}))
        streams = load_export(path)
        assert streams == {"mood_entries": [{"id": 1}], "journal_entries": [], "thought_records": []}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ExportFormatError, match="Cannot read"):
            load_export(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text("{not json")
        with pytest.raises(ExportFormatError, match="not valid JSON"):
            load_export(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "export.json"
        path.write_text(json.dumps([1, 2, 3]))
        with pytest.raises(ExportFormatError, match="JSON object"):
            load_export(path)

        path.write_text(json.dumps({"moodEntries": {"id": 1}}))
        with pytest.raises(ExportFormatError, match="moodEntries must be a list"):
            load_export(path)


class TestMain:
    """Tests for the CLI entry point"""

    def test_prints_insights(self, export_file, capsys):
        assert main([str(export_file)]) == EXIT_OK
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == "Your most frequently recorded emotion is Joy, which appears in 1 entries."
        assert len(lines) == 5

    def test_prints_json_payload(self, export_file, capsys):
        assert main([str(export_file), "--json"]) == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert list(payload) == ["connections", "insights"]
        assert payload["connections"]["Fear"]["averageImprovement"] == -4.0
        assert payload["connections"]["Fear"]["journalEntries"][0]["id"] == "j1"

    def test_bad_file_exits_2(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == EXIT_BAD_INPUT
        assert "error:" in capsys.readouterr().err

    def test_log_level_flag(self, export_file, monkeypatch):
        monkeypatch.setenv("RESILIENCE_LOG_LEVEL", "INFO")
        assert main([str(export_file), "--log-level", "WARNING"]) == EXIT_OK
