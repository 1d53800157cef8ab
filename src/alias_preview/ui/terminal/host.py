"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

prompt_toolkit host for the alias preview.

This module provides the PromptToolkitHost class which connects a
PreviewSession to a prompt_toolkit PromptSession: every text change
redraws the preview, and accepting, interrupting or clearing the screen
erase it first.
"""
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.filters import has_focus
from prompt_toolkit.history import History, InMemoryHistory
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.bindings.named_commands import get_by_name
from prompt_toolkit.output import Output

from alias_preview.core.dictionary import AliasDictionaries
from alias_preview.ui.terminal.capabilities import PromptToolkitTerminal
from alias_preview.ui.terminal.session import PreviewSession
from alias_preview.utils.logging_config import get_logger


class PromptToolkitHost:
    """Line editor showing alias previews while the user types."""

    def __init__(self, dictionaries: AliasDictionaries, config, message: str = "> ",
                 history: Optional[History] = None, input: Optional[Input] = None,
                 output: Optional[Output] = None):
        """Initialize the prompt session and attach the preview.
        
        Args:
            dictionaries: Host-owned alias mappings
            config: PreviewConfig with the preview settings
            message: Prompt message
            history: Line history, in memory by default
            input: prompt_toolkit input, the terminal by default
            output: prompt_toolkit output, the terminal by default
        """
        self.logger = get_logger(__name__)
        self.kb = KeyBindings()

        self.prompt_session = PromptSession(
            message,
            history=history or InMemoryHistory(),
            key_bindings=self.kb,
            input=input,
            output=output,
        )
        self.buffer = self.prompt_session.default_buffer

        terminal = PromptToolkitTerminal(self.prompt_session.app.output)
        self.preview = PreviewSession.from_config(
            config,
            lambda: self.buffer.text,
            dictionaries,
            terminal,
        )

        self.buffer.on_text_changed += self._on_text_changed
        self._register_key_bindings()

    def _on_text_changed(self, _buffer):
        self.preview.on_redraw()

    def _register_key_bindings(self):
        buffer_focused = has_focus(self.buffer)

        @self.kb.add('enter', filter=buffer_focused)
        def _(event):
            """Erase the preview before the line is accepted."""
            self.preview.on_accept(lambda: get_by_name('accept-line').call(event))

        @self.kb.add('c-c', filter=buffer_focused)
        def _(event):
            """Erase the preview, then abort the line."""
            self.preview.on_interrupt()
            event.app.exit(exception=KeyboardInterrupt, style='class:aborting')

        @self.kb.add('c-l')
        def _(event):
            """Clear the screen and draw the preview again."""
            # The screen is wiped as a whole, so there is nothing left to erase
            self.preview.forget()
            get_by_name('clear-screen').call(event)
            self._reserve_preview_rows(event.app)
            self.preview.on_redraw()

    def _reserve_preview_rows(self, app):
        """Move the cursor down so the prompt does not start on the top row.

        Previews drawn above the cursor line need free rows there; on the
        top row cursor_up stops and the preview would land on the prompt.
        """
        rows = self.preview.rows_needed_above()
        if not rows:
            return

        app.output.write_raw("\r\n" * rows)
        app.output.flush()
        # The row reported for the cleared screen is stale now
        app.renderer.request_absolute_cursor_position()
        self.logger.debug(f"Reserved {rows} row(s) above the prompt after clearing the screen")

    def prompt(self, message: Optional[str] = None) -> str:
        """Read one line, clearing any stale preview before editing starts.
        
        Raises:
            KeyboardInterrupt: When the line is interrupted with Ctrl+C
            EOFError: When Ctrl+D is pressed on an empty line
        """
        return self.prompt_session.prompt(message, pre_run=self.preview.on_line_reset)
