"""
Module: test_cli.py

Author: Michael Economou
Date: 2026-10-17

Tests for the command line interface.
"""

import json
import os

import pytest

from namecraft.cli import main, parse_rule, parse_selection
from namecraft.core.exceptions import InvalidRuleError, InvalidSelectionError
from namecraft.core.word import EditAction, EditRule
from namecraft.utils.shared.json_config_manager import create_app_config_manager


@pytest.fixture
def run(tmp_path):
    """Run the CLI with a throwaway config directory."""
    config_dir = str(tmp_path / "cfg")

    def _run(*args):
        return main(["--config-dir", config_dir, *args])

    return _run


class TestArgumentParsing:
    """Test selection and rule parsing"""

    def test_parse_selection(self):
        assert parse_selection("0:2") == (0, 2, 2)
        assert parse_selection("1:0-4") == (1, 0, 4)

    @pytest.mark.parametrize("text", ["2", "a:1", "0:", "0:x-2"])
    def test_bad_selection(self, text):
        with pytest.raises(InvalidSelectionError):
            parse_selection(text)

    def test_parse_rule(self):
        assert parse_rule("replace=final") == EditRule(EditAction.REPLACE, "final")
        assert parse_rule("remove") == EditRule(EditAction.REMOVE)
        assert parse_rule("suffix=a=b") == EditRule(EditAction.SUFFIX, "a=b")

    def test_bad_rule(self):
        with pytest.raises(InvalidRuleError):
            parse_rule("explode=1")

    def test_unknown_method_is_rejected_by_argparse(self, run, take_files):
        with pytest.raises(SystemExit) as excinfo:
            run("preview", take_files[0], "--method", "magic")
        assert excinfo.value.code == 2


class TestTokensCommand:
    """Test the tokens subcommand"""

    def test_lists_tokens_and_classes(self, run, capsys):
        assert run("tokens", "/some/dir/clip_01.mp4") == 0
        out = capsys.readouterr().out

        assert out.splitlines()[0] == "clip_01.mp4"
        assert "'.mp'" in out
        assert "numeric" in out
        assert "separator" in out


class TestPreviewCommand:
    """Test the preview subcommand"""

    def test_numbering_preview(self, run, take_files, tmp_path, capsys):
        code = run("preview", *take_files[:2], "--method", "numbering", "--padding", "3")
        out = capsys.readouterr().out

        assert code == 0
        assert "A_001.mov -> A_001_001.mov" in out
        assert "A_002.mov -> A_002_002.mov" in out
        assert sorted(os.listdir(tmp_path)) == ["A_001.mov", "A_002.mov", "B_999.mov"]

    def test_duplicate_names_fail(self, run, take_files, capsys):
        code = run("preview", *take_files[:2], "--method", "pattern", "--pattern", "same")
        out = capsys.readouterr().out

        assert code == 1
        assert "Duplicate name in this batch" in out

    def test_regex_preview(self, run, take_files, capsys):
        args = ["--method", "regex", "--regex", r"(\w)_(\d+)", "--replacement", "$2-$1"]
        code = run("preview", take_files[0], *args)
        assert code == 0
        assert "A_001.mov -> 001-A.mov" in capsys.readouterr().out

    def test_bad_selection_reports_error(self, run, take_files, capsys):
        code = run("preview", *take_files, "--method", "word", "--select", "0:1")
        err = capsys.readouterr().err

        assert code == 2
        assert "separator" in err

    def test_bad_rule_reports_error(self, run, take_files, capsys):
        code = run("preview", *take_files, "--method", "word", "--rule", "explode")
        assert code == 2
        assert "Unknown word rule action" in capsys.readouterr().err


class TestRenameCommand:
    """Test the rename subcommand"""

    def test_word_rename_with_propagation(self, run, take_files, tmp_path, capsys):
        args = ["--method", "word", "--similar", "--select", "0:2", "--rule", "prefix=take"]
        code = run("rename", *take_files, *args)
        out = capsys.readouterr().out

        assert code == 0
        assert sorted(os.listdir(tmp_path)) == ["A_take001.mov", "A_take002.mov", "B_999.mov"]
        assert "3 files renamed successfully" in out

    def test_word_apply_to_all(self, run, take_files, tmp_path):
        code = run("rename", *take_files, "--method", "word", "--word", "A", "--rule", "remove")
        assert code == 0
        assert sorted(os.listdir(tmp_path)) == ["B_999.mov", "_001.mov", "_002.mov"]

    def test_range_selection_as_one_word(self, run, tmp_path):
        path = tmp_path / "my_long_name.txt"
        path.write_text("x")

        args = ["--method", "word", "--select", "0:0-4", "--group", "--rule", "replace=short"]
        code = run("rename", str(path), *args)

        assert code == 0
        assert (tmp_path / "short.txt").exists()

    def test_conflict_exit_code(self, run, take_files, tmp_path, capsys):
        (tmp_path / "X.mov").write_text("taken")

        code = run("rename", take_files[0], "--method", "pattern", "--pattern", "X")
        captured = capsys.readouterr()

        assert code == 1
        assert "A file with this name already exists" in captured.err
        assert "Rename failed: 1 files" in captured.out
        assert os.path.exists(take_files[0])

    def test_save_options(self, run, take_files, tmp_path):
        code = run(
            "rename", take_files[0], "--method", "numbering", "--start", "5", "--save-options"
        )
        assert code == 0
        assert (tmp_path / "A_001_5.mov").exists()

        saved = json.loads((tmp_path / "cfg" / "config.json").read_text(encoding="utf-8"))
        assert saved["rename"]["method"] == "numbering"
        assert saved["rename"]["numbering_start"] == 5

        # Saved options become the defaults of the next run
        assert run("rename", take_files[1]) == 0
        assert (tmp_path / "A_002_5.mov").exists()


class TestRememberedOptions:
    """Test options that fall back to the saved configuration"""

    @pytest.fixture
    def saved(self, tmp_path):
        """Write rename options to the config directory used by ``run``."""

        def _save(**options):
            manager = create_app_config_manager(config_dir=str(tmp_path / "cfg"))
            manager.get_category("rename").update(options)
            assert manager.save()

        return _save

    WORD_ARGS = ("--method", "word", "--select", "0:2", "--rule", "prefix=x")

    def test_similar_selection_is_on_by_default(self, run, take_files, capsys):
        assert run("preview", *take_files, *self.WORD_ARGS) == 0
        out = capsys.readouterr().out
        assert "A_002.mov -> A_x002.mov" in out
        assert "B_999.mov -> " not in out

    def test_saved_similar_flag_is_used(self, run, saved, take_files, capsys):
        saved(apply_similar_pattern=False)
        assert run("preview", *take_files, *self.WORD_ARGS) == 0
        out = capsys.readouterr().out
        assert "A_001.mov -> A_x001.mov" in out
        assert "A_002.mov -> " not in out

        assert run("preview", *take_files, *self.WORD_ARGS, "--similar") == 0
        assert "A_002.mov -> A_x002.mov" in capsys.readouterr().out

    def test_saved_method_configures_word_session(self, run, saved, take_files, capsys):
        saved(method="word", apply_similar_pattern=False)
        assert run("preview", *take_files, "--select", "1:0", "--rule", "remove") == 0
        assert "A_002.mov -> _002.mov" in capsys.readouterr().out

    def test_saved_case_sensitivity(self, run, saved, take_files, capsys):
        saved(case_sensitive=True)
        args = ["--method", "replace", "--find", "a", "--replace", "z"]

        assert run("preview", take_files[0], *args) == 0
        assert "A_001.mov -> " not in capsys.readouterr().out

        assert run("preview", take_files[0], *args, "--no-case-sensitive") == 0
        assert "A_001.mov -> z_001.mov" in capsys.readouterr().out

    def test_save_word_flags(self, run, take_files, tmp_path):
        args = ["--method", "word", "--no-similar", "--group", "--save-options"]
        assert run("rename", *take_files, *args, "--select", "0:0", "--rule", "suffix=1") == 0
        assert (tmp_path / "A1_001.mov").exists()
        assert (tmp_path / "A_002.mov").exists()

        saved = json.loads((tmp_path / "cfg" / "config.json").read_text(encoding="utf-8"))
        assert saved["rename"]["apply_similar_pattern"] is False
        assert saved["rename"]["treat_selection_as_one"] is True
        assert saved["rename"]["use_similar_pattern_filter"] is False
