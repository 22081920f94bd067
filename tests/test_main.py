"""Tests for the command line entry point."""

from main import main, parse_args, run_once


class TestCommandLine:
    """Test the headless --expr mode."""

    def test_parse_defaults(self):
        args = parse_args([])
        assert args.expr is None
        assert args.log_level == "WARNING"

    def test_run_once_prints_result(self, capsys):
        assert run_once("2^3^2") == 0
        assert capsys.readouterr().out.strip() == "512"

    def test_run_once_reports_error(self, capsys):
        assert run_once("(1+2") == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: ")

    def test_main_with_expression(self, capsys):
        assert main(["--expr", "8-3-2", "--log-level", "ERROR"]) == 0
        assert capsys.readouterr().out.strip() == "3"
