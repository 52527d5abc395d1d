"""Default configuration values for grouplist."""

from __future__ import annotations

from typing import Final

LOGGER_NAME: Final[str] = "grouplist"
CONSOLE_HANDLER_NAME: Final[str] = "grouplist-console"

# ---------------------------------------------------------------------------
# Qt view constants
# ---------------------------------------------------------------------------

WINDOW_TITLE: Final[str] = "Grouped List"
WINDOW_DEFAULT_SIZE: Final[tuple[int, int]] = (360, 480)
# Group header rows are drawn in a bold face so they read as section titles.
GROUP_FONT_BOLD: Final[bool] = True
TREE_INDENTATION_PX: Final[int] = 16

# ---------------------------------------------------------------------------
# CLI constants
# ---------------------------------------------------------------------------

CLI_ROOT_LABEL: Final[str] = "groups"
CLI_GROUP_STYLE: Final[str] = "bold"
CLI_CHILD_STYLE: Final[str] = ""
CLI_ID_STYLE: Final[str] = "dim"
# ``--group "Label=child1,child2"``
CLI_GROUP_SEPARATOR: Final[str] = "="
CLI_CHILD_SEPARATOR: Final[str] = ","
