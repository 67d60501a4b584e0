from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the shell lifecycle: logging bootstrap, configuration merge
(defaults, persisted settings and CLI overrides), optional startup reload,
and the read-dispatch-print loop over standard input.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional, TextIO

from treeshell.core.services.persistence import reload_namespace
from treeshell.core.services.validator import validate_config
from treeshell.domain.config import get_config_file, get_default_config, load_config, save_config
from treeshell.domain.constants import DEFAULT_STATE_FILE
from treeshell.domain.errors import NamespaceError
from treeshell.domain.shell_models import Command, CommandResult
from treeshell.infra.fs import normalize_path
from treeshell.infra.logging import LoggingConfig, configure_logging, get_default_log_path, get_logger
from treeshell.interface.cli import args as cli_args
from treeshell.interface.cli.dispatcher import (
    ParsedCommand,
    ShellSession,
    dispatch,
    execute_line,
    format_error,
)
from treeshell.interface.cli.menu import render_menu
from treeshell.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the interactive shell.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 on quit or end of input, 1 if the settings
             could not be saved, 130 on interrupt).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap: keep the console quiet unless debugging
    log_file = args.log_file
    if log_file == cli_args.DEFAULT_LOG_FILE_SENTINEL:
        log_file = get_default_log_path()
    configure_logging(LoggingConfig.for_shell(debug=args.debug, log_file=log_file))

    # 3. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        return _save_settings(conf)

    if conf["locale"] != i18n.locale:
        i18n.load_locale(conf["locale"])

    # 4. Session bootstrap
    session = ShellSession(
        state_file=normalize_path(conf["state_file"], DEFAULT_STATE_FILE),
        autosave_on_quit=conf["autosave_on_quit"],
    )
    if conf["load_on_start"]:
        _startup_reload(session)

    if conf["show_menu"]:
        _emit(render_menu(), sys.stdout)

    # 5. Interactive loop
    try:
        run_repl(session, prompt=conf["prompt"], interactive=sys.stdin.isatty())
    except KeyboardInterrupt:
        print(file=sys.stdout)
        print(i18n.t("cli.status.interrupted"), file=sys.stderr)
        return 130

    return 0

# -----------------------------------------------------------------------------
# READ-DISPATCH-PRINT LOOP
# -----------------------------------------------------------------------------

def run_repl(
        session: ShellSession,
        *,
        prompt: str = "",
        interactive: bool = False,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
) -> None:
    """
    Read commands until 'quit' or end of input.

    End of input behaves like 'quit' (including the implicit save).

    Args:
        session: Session to drive.
        prompt: Text written before each read when interactive.
        interactive: Whether to write the prompt.
        stdin: Input stream (defaults to sys.stdin).
        stdout: Stream for command output (defaults to sys.stdout).
        stderr: Stream for error lines (defaults to sys.stderr).
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    while session.running:
        if interactive and prompt:
            stdout.write(prompt)
            stdout.flush()

        line = stdin.readline()
        if not line:
            logger.debug("End of input reached, quitting")
            _report(dispatch(session, ParsedCommand(keyword="quit", command=Command.QUIT)), stdout, stderr)
            break

        result = execute_line(session, line)
        if result is not None:
            _report(result, stdout, stderr)

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    None values are treated as 'not given' and leave the base untouched.
    """
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out


def _startup_reload(session: ShellSession) -> None:
    """Reload the state file at startup, reporting failures without aborting."""
    if not os.path.exists(session.state_file):
        logger.info(f"No state file at '{session.state_file}', starting empty")
        return
    try:
        reload_namespace(session.tree, session.state_file)
    except NamespaceError as e:
        print(i18n.t("cli.errors.load_failed", message=e.message), file=sys.stderr)


def _save_settings(conf: Dict[str, Any]) -> int:
    """Persist the effective configuration as the user settings file."""
    path = get_config_file()
    if not save_config(conf, path):
        print(i18n.t("cli.errors.config_save_failed", path=path), file=sys.stderr)
        return 1
    print(i18n.t("cli.status.config_saved", path=path))
    return 0


def _report(result: CommandResult, stdout: TextIO, stderr: TextIO) -> None:
    _emit(result.output, stdout)
    error = format_error(result)
    if error:
        stderr.write(error + "\n")
        stderr.flush()


def _emit(lines: List[str], stream: TextIO) -> None:
    for line in lines:
        stream.write(line + "\n")
    stream.flush()

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
