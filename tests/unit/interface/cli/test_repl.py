from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Verifies the read-dispatch-print loop over in-memory streams (output and
error routing, implicit quit at end of input) and the configuration
entry points of main().
"""

import io
import json
import os
from unittest.mock import patch

import pytest

from treeshell.infra.logging import shutdown_logging
from treeshell.interface.cli.app import _merge_config, main, run_repl
from treeshell.interface.cli.dispatcher import ShellSession


def _run(session: ShellSession, script: str, **kwargs):
    stdin = io.StringIO(script)
    stdout = io.StringIO()
    stderr = io.StringIO()
    run_repl(session, stdin=stdin, stdout=stdout, stderr=stderr, **kwargs)
    return stdout.getvalue(), stderr.getvalue()


@pytest.fixture
def reset_logging():
    """Detach the handlers main() installs so later tests start clean."""
    yield
    shutdown_logging()

# -----------------------------------------------------------------------------
# REPL LOOP
# -----------------------------------------------------------------------------

def test_repl_runs_docs_scenario(session):
    """TC-01: The documented session through the shell front end."""
    script = "\n".join([
        "mkdir /docs",
        "creat /docs/readme",
        "ls /docs",
        "cd /docs",
        "pwd",
        "rmdir /docs",
        "rm /docs/readme",
        "cd /",
        "rmdir /docs",
        "ls",
        "quit",
    ]) + "\n"

    out, err = _run(session, script)

    lines = out.splitlines()
    assert lines[0] == "readme\tREG"
    assert lines[1] == "/docs"
    assert err == "Error: Directory not empty!\n"
    assert session.running is False
    assert len(session.tree) == 0


def test_repl_stops_at_quit(session):
    out, _ = _run(session, "quit\nmkdir /after\n")

    assert "/after" not in session.tree
    assert out.strip().endswith("File system saved and program terminated.")


def test_repl_end_of_input_acts_as_quit(session):
    """TC-02: EOF without quit still saves to the state file."""
    _run(session, "mkdir /docs\ncreat /docs/readme")

    assert session.running is False
    with open(session.state_file, "r", encoding="utf-8") as f:
        assert f.read() == "DIR\t/docs\nREG\t/docs/readme\n"


def test_repl_errors_go_to_stderr(session):
    out, err = _run(session, "bogus\ncd /missing\n\nquit\n")

    assert "Error: Invalid command: bogus" in err
    assert "Error: Invalid directory!" in err
    assert "Error" not in out


def test_repl_prompt_only_when_interactive(tmp_path):
    quiet = ShellSession(state_file=str(tmp_path / "a.txt"), autosave_on_quit=False)
    out, _ = _run(quiet, "pwd\nquit\n", prompt="$ ")
    assert "$ " not in out

    chatty = ShellSession(state_file=str(tmp_path / "b.txt"), autosave_on_quit=False)
    out, _ = _run(chatty, "pwd\nquit\n", prompt="$ ", interactive=True)
    assert out.startswith("$ /\n$ ")

# -----------------------------------------------------------------------------
# CONFIGURATION ENTRY POINTS
# -----------------------------------------------------------------------------

def test_merge_config_ignores_none():
    merged = _merge_config({"a": 1, "b": 2}, {"a": None, "b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3}


def test_main_dump_config(reset_logging, capsys, tmp_path):
    code = main([
        "--use-defaults", "--dump-config",
        "-f", str(tmp_path / "fs.txt"), "--no-menu",
    ])

    assert code == 0
    conf = json.loads(capsys.readouterr().out)
    assert conf["state_file"] == str(tmp_path / "fs.txt")
    assert conf["show_menu"] is False
    assert conf["autosave_on_quit"] is True


def test_main_save_config_writes_user_settings(reset_logging, capsys, tmp_path):
    """TC-03: '--save-config' persists the effective settings and exits."""
    target = tmp_path / "TreeShell" / "settings.json"

    with patch("treeshell.interface.cli.app.get_config_file", return_value=str(target)):
        code = main(["--use-defaults", "--no-menu", "--prompt", "> ", "--save-config"])

    assert code == 0
    assert str(target) in capsys.readouterr().out
    stored = json.loads(target.read_text(encoding="utf-8"))
    assert stored["settings"]["show_menu"] is False
    assert stored["settings"]["prompt"] == "> "


def test_main_save_config_failure_exit_code(reset_logging, capsys, tmp_path):
    with patch("treeshell.interface.cli.app.get_config_file", return_value=str(tmp_path / "s.json")):
        with patch("treeshell.interface.cli.app.save_config", return_value=False):
            code = main(["--use-defaults", "--save-config"])

    assert code == 1
    assert "s.json" in capsys.readouterr().err


def test_main_resolves_relative_state_file(reset_logging, monkeypatch, tmp_path):
    """TC-04: The session receives an absolute state file path."""
    monkeypatch.chdir(tmp_path)

    with patch("treeshell.interface.cli.app.run_repl") as mock_repl:
        code = main(["--use-defaults", "--no-menu", "-f", "fs.txt"])

    assert code == 0
    session = mock_repl.call_args.args[0]
    assert session.state_file == os.path.abspath("fs.txt")
    assert os.path.isabs(session.state_file)
