from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the shell program and translates the
parsed argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from treeshell.domain.constants import DEFAULT_STATE_FILE
from treeshell.utils.i18n import i18n

# Sentinel for '--log-file' given without a path
DEFAULT_LOG_FILE_SENTINEL = "__default__"

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeshell CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treeshell",
        description=i18n.t("app.description"),
    )

    # --- Persistence ---
    p.add_argument(
        "-f", "--state-file",
        dest="state_file",
        default=None,
        help=i18n.t("cli.args.state_file", state_file=DEFAULT_STATE_FILE),
    )
    p.add_argument(
        "--load",
        action="store_true",
        help=i18n.t("cli.args.load"),
    )
    p.add_argument(
        "--no-autosave",
        action="store_true",
        help=i18n.t("cli.args.no_autosave"),
    )

    # --- Interaction ---
    p.add_argument(
        "--no-menu",
        action="store_true",
        help=i18n.t("cli.args.no_menu"),
    )
    p.add_argument(
        "--prompt",
        default=None,
        help=i18n.t("cli.args.prompt"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save_config"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const=DEFAULT_LOG_FILE_SENTINEL,
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["state_file"] = args.state_file
    overrides["prompt"] = args.prompt

    if args.load:
        overrides["load_on_start"] = True
    if args.no_autosave:
        overrides["autosave_on_quit"] = False
    if args.no_menu:
        overrides["show_menu"] = False

    return overrides
