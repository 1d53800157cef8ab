"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Terminal capabilities used to draw the preview.

The renderer only needs a handful of cursor-relative primitives. They are
described by TerminalCapabilities and implemented on top of a
prompt_toolkit Output by PromptToolkitTerminal.
"""
from abc import ABC, abstractmethod
from typing import Optional

from prompt_toolkit.output import ColorDepth, Output
from prompt_toolkit.styles import DEFAULT_ATTRS

# DEC save/restore cursor, understood by every vt100 compatible terminal
SAVE_CURSOR = "\x1b7"
RESTORE_CURSOR = "\x1b8"


class TerminalCapabilities(ABC):
    """Abstract cursor-relative drawing primitives."""

    @abstractmethod
    def cursor_up(self):
        """Move the cursor up one line."""
        pass

    @abstractmethod
    def cursor_down(self):
        """Move the cursor down one line."""
        pass

    @abstractmethod
    def erase_line(self):
        """Erase the line the cursor is on."""
        pass

    @abstractmethod
    def save_cursor(self):
        pass

    @abstractmethod
    def restore_cursor(self):
        pass

    @abstractmethod
    def write_colored(self, text: str, color: str):
        """Write text in the given prompt_toolkit color."""
        pass

    def flush(self):
        """Send buffered output to the terminal."""
        pass


class PromptToolkitTerminal(TerminalCapabilities):
    """Terminal capabilities backed by a prompt_toolkit Output."""

    def __init__(self, output: Output, color_depth: Optional[ColorDepth] = None):
        """Initialize the terminal.
        
        Args:
            output: prompt_toolkit output to draw on (usually app.output)
            color_depth: Color depth to use, defaults to the output's default
        """
        self.output = output
        self.color_depth = color_depth or output.get_default_color_depth()

    def cursor_up(self):
        self.output.cursor_up(1)

    def cursor_down(self):
        self.output.cursor_down(1)

    def erase_line(self):
        self.output.write_raw("\r")
        self.output.erase_end_of_line()

    def save_cursor(self):
        self.output.write_raw(SAVE_CURSOR)

    def restore_cursor(self):
        self.output.write_raw(RESTORE_CURSOR)

    def write_colored(self, text: str, color: str):
        self.output.set_attributes(DEFAULT_ATTRS._replace(color=color or None), self.color_depth)
        # Output.write() escapes control characters found in the text
        self.output.write(text)
        self.output.reset_attributes()

    def flush(self):
        self.output.flush()
