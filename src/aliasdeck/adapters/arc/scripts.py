"""AppleScript sources for switching Arc spaces and selecting tabs."""

from __future__ import annotations

from typing import Final

SPACES_MENU_INDEX: Final[int] = 6


def applescript_string(value: str) -> str:
    """Quote ``value`` as an AppleScript string literal."""

    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def menu_switch_script(workspace_name: str) -> str:
    """Click the space in Arc's Spaces menu (needs Accessibility permission)."""

    name = applescript_string(workspace_name)
    return f"""
tell application "System Events"
  tell process "Arc"
    set frontmost to true
    try
      click menu item {name} of menu 1 of menu bar item {SPACES_MENU_INDEX} of menu bar 1
      return true
    on error
      return false
    end try
  end tell
end tell
"""


def space_focus_script(workspace_name: str) -> str:
    name = applescript_string(workspace_name)
    return f"""
tell application "Arc"
  activate
  tell front window
    try
      set targetSpace to first space whose title is {name}
      tell targetSpace to focus
      return true
    on error
      return false
    end try
  end tell
end tell
"""


def tab_keystroke_script(index: int, modifier_key: str) -> str:
    modifier = f"{modifier_key.strip().lower()} down"
    return f"""
tell application "System Events"
  tell process "Arc"
    set frontmost to true
    delay 0.1
    keystroke "{index}" using {{{modifier}}}
    return true
  end tell
end tell
"""
