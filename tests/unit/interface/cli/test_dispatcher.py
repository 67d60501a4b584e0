from __future__ import annotations

"""
Unit tests for the Shell Command Dispatcher.

Verifies:
1. Tokenization of input lines.
2. Routing of every command to the namespace and persistence layers.
3. Conversion of namespace failures into error results.
4. The quit command and its implicit save.
"""

import os

import pytest

from treeshell.domain.errors import ErrorKind
from treeshell.domain.shell_models import Command, create_success_result
from treeshell.interface.cli.dispatcher import (
    ShellSession,
    execute_line,
    format_error,
    parse_command_line,
)
from treeshell.utils.i18n import i18n

# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

def test_parse_keyword_and_argument():
    parsed = parse_command_line("  MKDIR   /docs  \n")

    assert parsed.keyword == "mkdir"
    assert parsed.command is Command.MKDIR
    assert parsed.argument == "/docs"


def test_parse_keeps_only_first_argument():
    parsed = parse_command_line("creat /a /b /c")
    assert parsed.argument == "/a"


@pytest.mark.parametrize("line", ["", "   ", "\n"])
def test_parse_blank_line(line):
    assert parse_command_line(line) is None


def test_parse_unknown_keyword():
    parsed = parse_command_line("format /")

    assert parsed.command is None
    assert parsed.keyword == "format"


def test_blank_line_executes_nothing(session):
    assert execute_line(session, "   ") is None
    assert session.running is True

# -----------------------------------------------------------------------------
# ROUTING
# -----------------------------------------------------------------------------

def test_unknown_command_is_reported(session):
    result = execute_line(session, "format /")

    assert not result.ok
    assert result.error_kind is ErrorKind.INVALID_COMMAND
    assert "format" in result.error


@pytest.mark.parametrize("keyword", ["mkdir", "rmdir", "creat", "rm"])
def test_missing_argument_is_invalid_pathname(session, keyword):
    result = execute_line(session, keyword)

    assert not result.ok
    assert result.error_kind is ErrorKind.INVALID_PATHNAME
    assert len(session.tree) == 0


def test_mkdir_creat_ls(session):
    assert execute_line(session, "mkdir /docs").ok
    assert execute_line(session, "creat /docs/readme").ok

    result = execute_line(session, "ls /docs")

    assert result.output == ["readme\tREG"]


def test_ls_without_argument_lists_cursor(session):
    execute_line(session, "mkdir /docs")
    execute_line(session, "creat /top")

    assert execute_line(session, "ls").output == ["docs\tDIR", "top\tREG"]


def test_cd_and_pwd(session):
    execute_line(session, "mkdir /docs")

    execute_line(session, "cd /docs")
    assert execute_line(session, "pwd").output == ["/docs"]

    execute_line(session, "cd")
    assert execute_line(session, "pwd").output == ["/"]


def test_namespace_failure_becomes_error_result(session):
    execute_line(session, "mkdir /docs")
    execute_line(session, "creat /docs/readme")

    result = execute_line(session, "rmdir /docs")

    assert not result.ok
    assert result.error_kind is ErrorKind.NOT_EMPTY
    assert format_error(result) == "Error: Directory not empty!"
    assert "/docs/readme" in session.tree


def test_rm_and_rmdir(session):
    execute_line(session, "mkdir /docs")
    execute_line(session, "creat /docs/readme")

    assert execute_line(session, "rm /docs/readme").ok
    assert execute_line(session, "rmdir /docs").ok
    assert len(session.tree) == 0


def test_cd_into_file_fails(session):
    execute_line(session, "creat /plain")

    result = execute_line(session, "cd /plain")

    assert result.error_kind is ErrorKind.INVALID_DIRECTORY
    assert execute_line(session, "pwd").output == ["/"]


def test_menu_lists_every_command(session):
    output = execute_line(session, "menu").output

    body = "\n".join(output)
    for command in Command:
        assert command.value in body

# -----------------------------------------------------------------------------
# PERSISTENCE COMMANDS
# -----------------------------------------------------------------------------

def test_save_without_argument_uses_state_file(session):
    execute_line(session, "mkdir /docs")

    result = execute_line(session, "save")

    assert result.ok
    with open(session.state_file, "r", encoding="utf-8") as f:
        assert f.read() == "DIR\t/docs\n"


def test_save_and_reload_explicit_file(session, tmp_path):
    target = str(tmp_path / "snapshot.txt")
    execute_line(session, "mkdir /docs")
    execute_line(session, "creat /docs/readme")
    execute_line(session, f"save {target}")

    execute_line(session, "rm /docs/readme")
    result = execute_line(session, f"reload {target}")

    assert result.ok
    assert "2 entries" in result.output[0]
    assert "/docs/readme" in session.tree


def test_reload_missing_file_keeps_tree(session, tmp_path):
    execute_line(session, "mkdir /keep")

    result = execute_line(session, f"reload {tmp_path / 'absent.txt'}")

    assert result.error_kind is ErrorKind.PERSISTENCE_FAILURE
    assert "/keep" in session.tree


def test_reload_reports_skipped_records(session, tmp_path):
    target = tmp_path / "partial.txt"
    target.write_text("DIR\t/a\nREG\t/missing/b\n", encoding="utf-8")

    result = execute_line(session, f"reload {target}")

    assert result.ok
    assert "1 skipped" in result.output[0]

# -----------------------------------------------------------------------------
# QUIT
# -----------------------------------------------------------------------------

def test_quit_saves_and_stops(session):
    execute_line(session, "mkdir /docs")

    result = execute_line(session, "quit")

    assert result.ok
    assert session.running is False
    assert os.path.exists(session.state_file)


def test_quit_without_autosave(tmp_path):
    session = ShellSession(state_file=str(tmp_path / "fs.txt"), autosave_on_quit=False)

    result = execute_line(session, "quit")

    assert result.ok
    assert session.running is False
    assert not os.path.exists(session.state_file)


def test_quit_still_stops_when_save_fails(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    session = ShellSession(state_file=str(blocker / "fs.txt"))

    result = execute_line(session, "quit")

    assert not result.ok
    assert result.error_kind is ErrorKind.PERSISTENCE_FAILURE
    assert session.running is False
    assert result.output


def test_format_error_on_success_is_none():
    assert format_error(create_success_result()) is None


def test_format_error_survives_unsupported_locale_switch(session):
    """TC-05: Switching to a locale without a file keeps the error prefix."""
    try:
        i18n.load_locale("fr")
        result = execute_line(session, "rmdir /nope")

        assert format_error(result).startswith("Error: ")
    finally:
        i18n.load_locale("en")
