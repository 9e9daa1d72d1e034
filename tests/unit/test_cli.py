#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for htmltoc CLI functionality.

This module tests the command-line interface components including argument
parsing, option flag generation and exit code mapping.
"""

import logging

import pytest

from htmltoc.cli import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_VALIDATION_ERROR,
    collect_cli_overrides,
    create_parser,
    get_exit_code_for_exception,
    resolve_cli_options,
    snake_to_kebab,
)
from htmltoc.exceptions import (
    ConfigurationError,
    DependencyError,
    MalformedInputError,
    RenderingError,
)
from htmltoc.logging_utils import configure_logging, resolve_log_level


@pytest.mark.unit
@pytest.mark.cli
class TestParser:
    """Test argument parser construction."""

    def test_snake_to_kebab(self):
        """Test conversion of option names to flag spellings."""
        assert snake_to_kebab("min_level") == "min-level"
        assert snake_to_kebab("tag") == "tag"

    def test_defaults_are_none(self):
        """Test option flags default to None so config files are not overridden."""
        args = create_parser().parse_args(["page.html"])
        assert collect_cli_overrides(args) == {}
        assert args.toc_only is False
        assert args.log_level == "WARNING"

    def test_option_flags(self):
        """Test option flags are generated from TocOptions fields."""
        args = create_parser().parse_args(
            [
                "page.html",
                "--min-level",
                "2",
                "--max-level",
                "3",
                "--tag",
                "unordered",
                "--heading",
                "Contents",
                "--toggle",
                "--no-initially-hide",
            ]
        )
        assert collect_cli_overrides(args) == {
            "min_level": 2,
            "max_level": 3,
            "tag": "unordered",
            "heading": "Contents",
            "toggle": True,
            "initially_hide": False,
        }

    def test_choices_enforced(self, capsys):
        """Test enumerated options reject unknown values."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["page.html", "--tag", "table"])
        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_int_type_enforced(self):
        """Test integer options reject non-integers."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["page.html", "--max-level", "three"])

    def test_help_mentions_defaults(self):
        """Test the generated help shows option defaults."""
        help_text = create_parser().format_help()
        assert "--exclude-class" in help_text
        assert "[2]" in help_text


@pytest.mark.unit
@pytest.mark.cli
class TestResolveCliOptions:
    """Test option resolution for the CLI."""

    def test_cli_flags_override_config(self, tmp_path, monkeypatch):
        """Test flags beat config file values key by key."""
        config = tmp_path / "site.yaml"
        config.write_text("toc:\n  max_level: 2\n  heading: Contents\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        args = create_parser().parse_args(["page.html", "--config", str(config), "--max-level", "4"])
        options = resolve_cli_options(args)

        assert options.max_level == 4
        assert options.heading == "Contents"

    def test_no_config(self, tmp_path, monkeypatch):
        """Test --no-config ignores discovered files."""
        (tmp_path / ".htmltoc.toml").write_text("max_level = 2\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        args = create_parser().parse_args(["page.html", "--no-config"])
        assert resolve_cli_options(args).max_level == 5

    def test_env_var(self, tmp_path, monkeypatch):
        """Test the HTMLTOC_CONFIG environment variable."""
        config = tmp_path / "env.json"
        config.write_text('{"toc_min_headers": 5}', encoding="utf-8")
        monkeypatch.setenv("HTMLTOC_CONFIG", str(config))
        monkeypatch.chdir(tmp_path)

        args = create_parser().parse_args(["page.html"])
        assert resolve_cli_options(args).min_headers == 5


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test exception to exit code mapping."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (ConfigurationError("bad"), EXIT_VALIDATION_ERROR),
            (DependencyError("missing", package_name="lxml"), EXIT_DEPENDENCY_ERROR),
            (FileNotFoundError("page.html"), EXIT_FILE_ERROR),
            (MalformedInputError("bad markup"), EXIT_PARSING_ERROR),
            (RenderingError("bad template"), EXIT_RENDERING_ERROR),
            (RuntimeError("boom"), EXIT_ERROR),
        ],
    )
    def test_mapping(self, error, expected):
        """Test each error category maps to its exit code."""
        assert get_exit_code_for_exception(error) == expected


@pytest.mark.unit
class TestLoggingUtils:
    """Test logging configuration."""

    def test_resolve_log_level(self):
        """Test level names and numbers."""
        assert resolve_log_level("debug") == logging.DEBUG
        assert resolve_log_level(logging.ERROR) == logging.ERROR
        assert resolve_log_level("nonsense") == logging.INFO

    def test_log_file(self, tmp_path):
        """Test log output is also written to the log file."""
        log_file = tmp_path / "htmltoc.log"
        root = configure_logging("INFO", log_file=str(log_file))
        logging.getLogger("htmltoc.test").info("hello from the test")
        for handler in root.handlers:
            handler.flush()

        assert "hello from the test" in log_file.read_text(encoding="utf-8")
        for handler in list(root.handlers):
            if isinstance(handler, logging.FileHandler):
                handler.close()
                root.removeHandler(handler)

    def test_handlers_replaced_and_stderr(self, capsys):
        """Test repeated setup keeps a single console handler writing to stderr."""
        configure_logging("WARNING")
        root = configure_logging("WARNING", trace_mode=True)
        logging.getLogger("htmltoc.test").warning("only once")

        assert len(root.handlers) == 1
        captured = capsys.readouterr()
        assert captured.err.count("only once") == 1
        assert "[htmltoc.test]" in captured.err
        assert captured.out == ""

    def test_unwritable_log_file(self, tmp_path, capsys):
        """Test a log file that cannot be opened is reported, not raised."""
        root = configure_logging("INFO", log_file=str(tmp_path / "missing" / "htmltoc.log"))

        assert len(root.handlers) == 1
        assert "Cannot write log file" in capsys.readouterr().err
