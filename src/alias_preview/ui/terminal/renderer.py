"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Preview rendering next to the edited line.

The renderer draws preview lines relative to the cursor and records in a
PreviewState how many lines it drew, so that clear() erases exactly those
lines and nothing else.
"""
from typing import List

from alias_preview.ui.terminal.capabilities import TerminalCapabilities
from alias_preview.ui.terminal.mode import PreviewPosition
from alias_preview.ui.terminal.state import PreviewState
from alias_preview.utils.logging_config import get_logger

CONTINUATION_INDENT = "  "


def display_lines(content: str) -> List[str]:
    """Split preview content into the lines it occupies on screen."""
    if not content:
        return []
    return content.split("\n")


class PreviewRenderer:
    """Draws and erases preview lines above or below the cursor line."""

    def __init__(self, terminal: TerminalCapabilities, position=PreviewPosition.ABOVE,
                 prefix: str = "→ ", color: str = "ansicyan"):
        """Initialize the renderer.
        
        Args:
            terminal: Capabilities used for drawing
            position: Draw above or below the cursor line
            prefix: Text prepended to the first preview line
            color: prompt_toolkit color for all preview text
        """
        self.terminal = terminal
        self.position = PreviewPosition(position)
        self.prefix = prefix
        self.color = color
        self.logger = get_logger(__name__)

    def format_line(self, index: int, line: str) -> str:
        """Prefix the first line and indent the following ones."""
        if index == 0:
            return f"{self.prefix}{line}"
        return f"{CONTINUATION_INDENT}{line}"

    def show(self, state: PreviewState, content: str):
        """Draw the preview and record it in the state.
        
        The state must not hold a displayed preview; clear() it first.
        
        Args:
            state: Preview state to update
            content: A single expansion or newline-joined preview lines
        """
        lines = display_lines(content)
        line_count = len(lines)
        terminal = self.terminal

        if line_count:
            terminal.save_cursor()
            match self.position:
                case PreviewPosition.ABOVE:
                    for _ in range(line_count):
                        terminal.cursor_up()
                    for index, line in enumerate(lines):
                        terminal.erase_line()
                        terminal.write_colored(self.format_line(index, line), self.color)
                        if index < line_count - 1:
                            terminal.cursor_down()
                case PreviewPosition.BELOW:
                    for index, line in enumerate(lines):
                        terminal.cursor_down()
                        terminal.erase_line()
                        terminal.write_colored(self.format_line(index, line), self.color)
            terminal.restore_cursor()
            terminal.flush()

        state.update(content, line_count)
        self.logger.debug(f"Displayed {line_count} preview line(s) {self.position.value}")

    def clear(self, state: PreviewState):
        """Erase the displayed preview, if any, and reset the state.

        Calling this when nothing is displayed does nothing.
        """
        if state.line_count > 0:
            terminal = self.terminal
            move = terminal.cursor_up if self.position == PreviewPosition.ABOVE else terminal.cursor_down

            terminal.save_cursor()
            for _ in range(state.line_count):
                move()
                terminal.erase_line()
            terminal.restore_cursor()
            terminal.flush()
            self.logger.debug(f"Cleared {state.line_count} preview line(s) {self.position.value}")
        state.reset()
