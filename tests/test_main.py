"""Tests for the command line entry point."""

from pathlib import Path

from memory_match.main import generate_log_filename, main, parse_args


class TestParseArgs:
    """Tests for parse_args function."""

    def test_defaults(self):
        args = parse_args([])
        assert args.config is None
        assert args.pairs is None
        assert not args.verbose
        assert args.game_log is None

    def test_overrides(self):
        args = parse_args(["--pairs", "4", "--columns", "2", "--seed", "9", "-v"])
        assert args.pairs == 4
        assert args.columns == 2
        assert args.seed == 9
        assert args.verbose


def test_generate_log_filename(tmp_path):
    """Test log files land in the given directory."""
    path = Path(generate_log_filename(str(tmp_path)))
    assert path.parent == tmp_path
    assert path.name.endswith("_memory.jsonl")


def test_invalid_pairs_exit_code(capsys):
    """Test a bad override is reported without starting a game."""
    assert main(["--pairs", "0"]) == 1
    assert "Invalid configuration" in capsys.readouterr().err


def test_invalid_config_file(tmp_path, capsys):
    """Test a bad config file is reported without starting a game."""
    path = tmp_path / "config.yaml"
    path.write_text("timing:\n  mismatch_delay: 0\n")
    assert main(["-c", str(path)]) == 1
    assert "Invalid configuration" in capsys.readouterr().err
