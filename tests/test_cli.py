"""
Tests for the command-line entry point and console writers.
"""

import io
import logging
import sys
from unittest.mock import MagicMock

import pytest

from file_explorer import cli
from file_explorer.container import DependencyContainer
from file_explorer.ui.console import PlainConsoleWriter, RichConsoleWriter


@pytest.fixture
def no_logging_setup(monkeypatch):
    mock_configure = MagicMock()
    monkeypatch.setattr(cli, "configure_logging", mock_configure)
    return mock_configure


class TestMain:
    def test_runs_in_working_directory(self, monkeypatch, tmp_path, no_logging_setup):
        monkeypatch.chdir(tmp_path)
        out = io.StringIO()

        status = cli.main(
            ["--no-pretty"],
            stdin=io.StringIO("ls\nexit\n"),
            stdout=out,
            deps=DependencyContainer(),
        )

        assert status == 0
        assert f"{tmp_path.resolve()} > Directory is empty.\n" in out.getvalue()
        assert out.getvalue().endswith("Goodbye.\n")

    def test_log_level_flag(self, monkeypatch, tmp_path, no_logging_setup):
        monkeypatch.chdir(tmp_path)

        cli.main(
            ["--log-level", "info"],
            stdin=io.StringIO("exit\n"),
            stdout=io.StringIO(),
            deps=DependencyContainer(),
        )

        assert no_logging_setup.call_args.args[0] == logging.INFO

    def test_invalid_log_level_flag(self, no_logging_setup, capsys):
        status = cli.main(["--log-level", "loud"], deps=DependencyContainer())

        assert status == 2
        assert "Invalid log level: loud" in capsys.readouterr().err
        no_logging_setup.assert_not_called()

    def test_pretty_flag_selects_rich_writer(self, monkeypatch, tmp_path, no_logging_setup):
        monkeypatch.chdir(tmp_path)
        deps = DependencyContainer()
        get_loop = MagicMock(wraps=deps.get_command_loop)
        monkeypatch.setattr(deps, "get_command_loop", get_loop)

        cli.main(
            ["--pretty"],
            stdin=io.StringIO("exit\n"),
            stdout=io.StringIO(),
            deps=deps,
        )

        assert isinstance(get_loop.call_args.kwargs["writer"], RichConsoleWriter)

    def test_each_run_writes_to_its_own_stream(self, monkeypatch, tmp_path, no_logging_setup):
        monkeypatch.chdir(tmp_path)
        deps = DependencyContainer()
        first, second = io.StringIO(), io.StringIO()

        cli.main([], stdin=io.StringIO("exit\n"), stdout=first, deps=deps)
        cli.main([], stdin=io.StringIO("exit\n"), stdout=second, deps=deps)

        assert first.getvalue().endswith("Goodbye.\n")
        assert second.getvalue().endswith("Goodbye.\n")

    def test_undecodable_stdin_bytes_are_replaced(self, monkeypatch, tmp_path, no_logging_setup):
        monkeypatch.chdir(tmp_path)
        raw = io.TextIOWrapper(io.BytesIO(b"touch \xff\nexit\n"), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", raw)
        out = io.StringIO()

        status = cli.main(["--no-pretty"], stdout=out, deps=DependencyContainer())

        assert status == 0
        assert "File created: \ufffd\n" in out.getvalue()
        assert (tmp_path / "\ufffd").exists()


class TestConsoleWriters:
    def test_plain_writer(self):
        out = io.StringIO()
        writer = PlainConsoleWriter(out)

        writer.write_prompt("/d > ")
        writer.write_line("[DIR] docs")

        assert out.getvalue() == "/d > [DIR] docs\n"

    def test_rich_writer_prints_brackets_literally(self):
        out = io.StringIO()
        writer = RichConsoleWriter(out)

        writer.write_prompt("/d > ")
        writer.write_line("[DIR] docs")
        writer.write_line("      :memo: [b]notes[/b]")

        assert "[DIR] docs\n" in out.getvalue()
        assert ":memo: [b]notes[/b]" in out.getvalue()
        assert out.getvalue().startswith("/d > ")


class TestDependencyContainer:
    def test_file_system_is_cached(self, dependency_container):
        assert dependency_container.get_file_system() is dependency_container.get_file_system()

    def test_registry_contains_every_command(self, dependency_container):
        registry = dependency_container.get_command_registry()

        assert [h.name for h in registry.handlers()] == [
            "ls", "cd", "mkdir", "touch", "rm", "info", "help", "exit",
        ]

    def test_reset(self, dependency_container):
        first = dependency_container.get_command_registry()
        dependency_container.reset()

        assert dependency_container.get_command_registry() is not first

    def test_passed_writer_is_used_every_time(self, dependency_container):
        first = PlainConsoleWriter(io.StringIO())
        second = PlainConsoleWriter(io.StringIO())

        assert dependency_container.get_command_loop(writer=first)._writer is first
        assert dependency_container.get_command_loop(writer=second)._writer is second

    def test_default_loop_is_cached(self, dependency_container):
        assert dependency_container.get_command_loop() is dependency_container.get_command_loop()
