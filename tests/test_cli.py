"""Tests for the runguide command line."""

import json

import pytest

from runguide.cli import build_parser, main, options_from_args


@pytest.fixture
def guide_file(tmp_path, guide_data):
    path = tmp_path / "guide.json"
    path.write_text(json.dumps(guide_data), encoding="utf-8")
    return path


class TestOptionsFromArgs:
    """Tests for flag to FormatOptions mapping."""

    def test_defaults(self):
        options = options_from_args(build_parser().parse_args(["guide.json"]))
        assert options.collapse_instruction_groups is False
        assert options.hide_comments is False
        assert options.hide_instruction_id is False
        assert options.hide_optional is False
        assert options.hide_safety is False
        assert options.ignored_rules == frozenset()

    def test_all_flags(self):
        args = build_parser().parse_args([
            "guide.json",
            "--collapse",
            "--hide-comments",
            "--hide-id",
            "--hide-optional",
            "--hide-safety",
            "--ignore-rule", "1", "3",
        ])
        options = options_from_args(args)
        assert options.collapse_instruction_groups is True
        assert options.hide_comments is True
        assert options.hide_instruction_id is True
        assert options.hide_optional is True
        assert options.hide_safety is True
        assert options.ignored_rules == frozenset({1, 3})


class TestMain:
    """Tests for the main entry point."""

    def test_renders_to_stdout(self, guide_file, capsys):
        assert main([str(guide_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("# Dark Souls III - Any%, Glitchless")
        assert "## Instructions" in out

    def test_ignore_rule(self, guide_file, capsys):
        assert main([str(guide_file), "--ignore-rule", "1"]) == 0
        out = capsys.readouterr().out
        assert "1. ~~No upgrades~~" in out
        assert "Longsword" not in out

    def test_output_file(self, guide_file, tmp_path, capsys):
        output = tmp_path / "walkthrough.md"
        assert main([str(guide_file), "-o", str(output)]) == 0
        text = output.read_text(encoding="utf-8")
        assert text.startswith("# Dark Souls III")
        assert capsys.readouterr().out == ""

    def test_list_rules(self, guide_file, capsys):
        assert main([str(guide_file), "--list-rules"]) == 0
        out = capsys.readouterr().out
        assert "No upgrades" in out
        assert "No Ashen Estus" in out
        assert "## Instructions" not in out

    def test_list_impactful_rules(self, tmp_path, guide_data, capsys):
        guide_data["rules"]["3"] = "No bows"
        path = tmp_path / "guide.json"
        path.write_text(json.dumps(guide_data), encoding="utf-8")

        assert main([str(path), "--list-rules", "--impactful-only"]) == 0
        out = capsys.readouterr().out
        assert "No upgrades" in out
        assert "No bows" not in out

    def test_invalid_guide(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"_schema": "dark-souls-3"}), encoding="utf-8")
        assert main([str(path)]) == 1
        assert "gameTitle" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_bad_arguments(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["guide.json", "--ignore-rule", "one"])
        assert exc_info.value.code == 2

    def test_undecodable_file(self, tmp_path, capsys):
        path = tmp_path / "guide.json"
        path.write_bytes(b'{"_schema": "dark-souls-3", "gameTitle": "\xff\xfe"}')
        assert main([str(path)]) == 1
        assert "UTF-8" in capsys.readouterr().err

    def test_unwritable_output(self, guide_file, tmp_path, capsys):
        output = tmp_path / "missing" / "walkthrough.md"
        assert main([str(guide_file), "-o", str(output)]) == 1
        assert "Failed to write" in capsys.readouterr().err
        assert not output.exists()
