"""
Tests for the command line interface.
"""

import io
import json

import pytest

from localpass import __version__
from localpass.app import main


EXPECTED_RAHUL = (
    "MUMBAI LOCAL PASS\n"
    "---\n"
    "Name: RAHUL SHARMA\n"
    "From: Dadar\n"
    "To: Andheri\n"
    "Class: FIRST\n"
    "Pass ID: FDADAND"
)


class TestRender:
    """Test the render command."""

    def test_render_from_file(self, isolated_env, passenger_file, capsys):
        main(["render", "--input", str(passenger_file)])
        assert capsys.readouterr().out == EXPECTED_RAHUL + "\n"

    def test_render_from_flags(self, isolated_env, capsys):
        main(["render", "--name", "Priya", "--from", "CST", "--to", "VT", "--class", "Second"])
        out = capsys.readouterr().out
        assert out.splitlines()[-1] == "Pass ID: SCSTVT"

    def test_render_from_stdin(self, isolated_env, valid_passenger, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(valid_passenger)))
        main(["render", "--input", "-"])
        assert capsys.readouterr().out == EXPECTED_RAHUL + "\n"

    def test_render_invalid(self, isolated_env, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"name": "a", "from": "b", "to": "c", "classType": "third"}))
        with pytest.raises(SystemExit) as exc:
            main(["render", "--input", str(path)])
        assert exc.value.code == 2
        captured = capsys.readouterr()
        assert captured.out == "INVALID PASS\n"
        assert "unknown_class" in captured.err

    def test_render_json_null(self, isolated_env, tmp_path, capsys):
        path = tmp_path / "null.json"
        path.write_text("null")
        with pytest.raises(SystemExit):
            main(["render", "--input", str(path)])
        assert capsys.readouterr().out == "INVALID PASS\n"

    def test_render_missing_flags(self, isolated_env, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["render", "--name", "Priya"])
        assert exc.value.code == 2
        assert capsys.readouterr().out == "INVALID PASS\n"

    def test_missing_file(self, isolated_env, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["render", "--input", str(tmp_path / "nope.json")])
        assert "Input file not found" in str(exc.value.code)

    def test_bad_json(self, isolated_env, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(SystemExit) as exc:
            main(["render", "--input", str(path)])
        assert "Invalid JSON" in str(exc.value.code)

    def test_non_utf8_file(self, isolated_env, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes('{"name": "Zoë", "from": "dadar", "to": "vt", "classType": "first"}'.encode("latin-1"))
        with pytest.raises(SystemExit) as exc:
            main(["render", "--input", str(path)])
        assert "Cannot read" in str(exc.value.code)

    def test_directory_input(self, isolated_env, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["render", "--input", str(tmp_path)])
        assert "not a file" in str(exc.value.code)

    def test_input_and_flags_rejected(self, isolated_env, passenger_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["render", "--input", str(passenger_file), "--name", "Priya"])
        assert "not both" in str(exc.value.code)
        assert capsys.readouterr().out == ""

    def test_log_file_written(self, isolated_env, passenger_file, monkeypatch, capsys):
        log_dir = isolated_env / "logs"
        monkeypatch.setenv("LOCALPASS_LOG_DIR", str(log_dir))
        main(["render", "--input", str(passenger_file)])
        content = next(log_dir.glob("localpass_*.log")).read_text()
        assert "FDADAND" in content
        assert "Pass Session Metrics" in content


class TestValidate:
    """Test the validate command."""

    def test_valid(self, isolated_env, passenger_file, capsys):
        main(["validate", "--input", str(passenger_file)])
        assert capsys.readouterr().out == "Valid\n"

    def test_invalid_lists_all_errors(self, isolated_env, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"name": "", "from": "dadar", "classType": "third"}))
        with pytest.raises(SystemExit) as exc:
            main(["validate", "--input", str(path)])
        assert exc.value.code == 2
        out = capsys.readouterr().out
        assert out.startswith("Invalid:\n")
        assert out.count(" - ") == 3


class TestMisc:
    """Version and help."""

    def test_version(self, isolated_env, capsys):
        main(["--version"])
        assert capsys.readouterr().out.strip() == __version__

    def test_no_command_prints_help(self, isolated_env, capsys):
        main([])
        assert "usage: localpass" in capsys.readouterr().out
