from __future__ import annotations

"""
Shell Command Dispatcher.

Parses one input line into a command keyword and its optional argument,
then routes it to the matching namespace or persistence operation. Every
NamespaceError raised by the core is turned into a failed CommandResult
here, so a bad command never ends the session.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from treeshell.core.namespace.tree import NamespaceTree
from treeshell.core.services.persistence import reload_namespace, save_namespace
from treeshell.domain.constants import DEFAULT_STATE_FILE
from treeshell.domain.errors import ErrorKind, NamespaceError
from treeshell.domain.shell_models import (
    Command,
    CommandResult,
    create_error_result,
    create_success_result,
)
from treeshell.interface.cli.menu import render_menu
from treeshell.utils.i18n import i18n

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# SESSION AND PARSING MODELS
# -----------------------------------------------------------------------------

@dataclass
class ShellSession:
    """
    State owned by one interactive session.

    Attributes:
        tree: The namespace manipulated by the commands.
        state_file: File used by save/reload without argument and by quit.
        autosave_on_quit: Whether quit saves the namespace first.
        running: Cleared by the quit command.
    """
    tree: NamespaceTree = field(default_factory=NamespaceTree)
    state_file: str = DEFAULT_STATE_FILE
    autosave_on_quit: bool = True
    running: bool = True


@dataclass(frozen=True)
class ParsedCommand:
    """A tokenized input line. 'command' is None for unknown keywords."""
    keyword: str
    command: Optional[Command]
    argument: Optional[str] = None

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_command_line(line: str) -> Optional[ParsedCommand]:
    """
    Split a raw input line into keyword and first argument.

    Args:
        line: Text typed at the prompt.

    Returns:
        Optional[ParsedCommand]: None for blank lines.
    """
    parts = line.split()
    if not parts:
        return None

    keyword = parts[0].lower()
    if len(parts) > 2:
        logger.debug(f"Ignoring extra arguments for '{keyword}': {parts[2:]}")

    return ParsedCommand(
        keyword=keyword,
        command=Command.from_keyword(keyword),
        argument=parts[1] if len(parts) > 1 else None,
    )


def execute_line(session: ShellSession, line: str) -> Optional[CommandResult]:
    """Parse and dispatch one input line. Blank lines yield None."""
    parsed = parse_command_line(line)
    if parsed is None:
        return None
    return dispatch(session, parsed)


def dispatch(session: ShellSession, parsed: ParsedCommand) -> CommandResult:
    """
    Run a parsed command against the session.

    Args:
        session: Session holding the namespace.
        parsed: Tokenized command.

    Returns:
        CommandResult: Output lines on success, error details on failure.
    """
    command = parsed.command
    if command is None:
        return create_error_result(
            ErrorKind.INVALID_COMMAND,
            i18n.t("shell.errors.invalid_command", command=parsed.keyword),
        )

    if command.requires_argument and not parsed.argument:
        return create_error_result(
            ErrorKind.INVALID_PATHNAME,
            i18n.t("shell.errors.missing_argument", command=command.value),
        )

    logger.debug(f"Dispatching {command.value} {parsed.argument or ''}".rstrip())
    try:
        return _run(session, command, parsed.argument or "")
    except NamespaceError as e:
        logger.debug(f"{command.value} failed: {e!r}")
        return create_error_result(e.kind, e.message)

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _run(session: ShellSession, command: Command, argument: str) -> CommandResult:
    """Route one command to its handler. Every Command member is covered."""
    tree = session.tree

    if command is Command.MKDIR:
        tree.make_directory(argument)
        return create_success_result()
    if command is Command.RMDIR:
        tree.remove_directory(argument)
        return create_success_result()
    if command is Command.LS:
        return create_success_result([entry.render() for entry in tree.list_directory(argument)])
    if command is Command.CD:
        # Bare 'cd' returns to the root
        tree.change_directory(argument or "/")
        return create_success_result()
    if command is Command.PWD:
        return create_success_result([tree.working_path()])
    if command is Command.CREAT:
        tree.create_file(argument)
        return create_success_result()
    if command is Command.RM:
        tree.remove_file(argument)
        return create_success_result()
    if command is Command.SAVE:
        return _save(session, argument)
    if command is Command.RELOAD:
        return _reload(session, argument)
    if command is Command.MENU:
        return create_success_result(render_menu())
    if command is Command.QUIT:
        return _quit(session)

    raise ValueError(f"Unhandled command: {command!r}")


def _save(session: ShellSession, argument: str) -> CommandResult:
    target = save_namespace(session.tree, argument or session.state_file)
    return create_success_result([i18n.t("shell.status.saved", path=target)])


def _reload(session: ShellSession, argument: str) -> CommandResult:
    path = argument or session.state_file
    report = reload_namespace(session.tree, path)
    if report.skipped:
        line = i18n.t(
            "shell.status.reloaded_partial",
            path=path, loaded=report.loaded, skipped=len(report.skipped),
        )
    else:
        line = i18n.t("shell.status.reloaded", path=path, loaded=report.loaded)
    return create_success_result([line])


def _quit(session: ShellSession) -> CommandResult:
    """Stop the session, saving to the state file first when enabled."""
    session.running = False
    if not session.autosave_on_quit:
        return create_success_result([i18n.t("shell.status.quit")])

    try:
        save_namespace(session.tree, session.state_file)
    except NamespaceError as e:
        return create_error_result(
            e.kind,
            i18n.t("shell.errors.quit_save_failed", message=e.message),
            output=[i18n.t("shell.status.quit")],
        )
    return create_success_result([i18n.t("shell.status.quit_saved")])


def format_error(result: CommandResult) -> Optional[str]:
    """Render a failed result as 'Error: <message>', None on success."""
    if result.ok:
        return None
    return i18n.t("shell.errors.prefix", message=result.error)
