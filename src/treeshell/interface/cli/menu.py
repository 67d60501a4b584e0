from __future__ import annotations

"""
Command Menu Renderer.

Builds the help text listing every shell command from the active locale.
"""

from typing import List

from treeshell.domain.constants import MENU_ORDER
from treeshell.utils.i18n import i18n


def render_menu() -> List[str]:
    """Return the menu lines: title, rule, then one line per command."""
    lines = [i18n.t("menu.title"), i18n.t("menu.rule")]
    lines.extend(i18n.t(f"menu.commands.{keyword}") for keyword in MENU_ORDER)
    return lines
