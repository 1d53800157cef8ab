"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Preview session controller.

This module provides the PreviewSession class which runs one preview
cycle per edit and clears the preview on the host's lifecycle events.
"""
from typing import Callable, Optional

from alias_preview.core.dictionary import AliasDictionaries
from alias_preview.core.segments import split_segments
from alias_preview.core.trigger import TriggerPolicy
from alias_preview.ui.terminal.capabilities import TerminalCapabilities
from alias_preview.ui.terminal.mode import PreviewPosition
from alias_preview.ui.terminal.renderer import PreviewRenderer, display_lines
from alias_preview.ui.terminal.state import PreviewState
from alias_preview.utils.logging_config import get_logger


class PreviewSession:
    """Owns the preview state and wires rendering to host events."""

    def __init__(self, get_buffer: Callable[[], str], dictionaries: AliasDictionaries,
                 renderer: PreviewRenderer, policy: TriggerPolicy):
        """Initialize the session.
        
        Args:
            get_buffer: Returns the current content of the edited line
            dictionaries: Host-owned alias mappings
            renderer: Renderer used to draw and erase the preview
            policy: Trigger policy deciding what to preview
        """
        self.get_buffer = get_buffer
        self.dictionaries = dictionaries
        self.renderer = renderer
        self.policy = policy
        self.state = PreviewState()
        self.logger = get_logger(__name__)

    @classmethod
    def from_config(cls, config, get_buffer: Callable[[], str], dictionaries: AliasDictionaries,
                    terminal: TerminalCapabilities) -> "PreviewSession":
        """Create a session from a PreviewConfig."""
        renderer = PreviewRenderer(
            terminal,
            position=config.position,
            prefix=config.prefix,
            color=config.color,
        )
        policy = TriggerPolicy(config.trigger, config.max_matches)
        return cls(get_buffer, dictionaries, renderer, policy)

    def clear(self):
        """Erase the current preview, if any."""
        self.renderer.clear(self.state)

    def forget(self):
        """Drop the preview state without erasing, after the host wiped the screen."""
        if self.state.is_displayed:
            self.logger.debug("Forgetting displayed preview after a full redraw")
        self.state.reset()

    def preview_content(self) -> Optional[str]:
        """Compute the preview for the current line, or None when nothing matches."""
        buffer = self.get_buffer()
        if not buffer:
            return None
        return self.policy.evaluate(split_segments(buffer), self.dictionaries)

    def rows_needed_above(self) -> int:
        """Rows to keep free above the cursor line for any preview of this line or the next edit.

        Zero when previews are drawn below the cursor line.
        """
        if self.renderer.position != PreviewPosition.ABOVE:
            return 0
        content = self.preview_content()
        return max(self.policy.max_lines, len(display_lines(content)))

    def check(self):
        """Run a full preview cycle: clear, recompute, show."""
        self.clear()

        content = self.preview_content()
        if content:
            self.renderer.show(self.state, content)

    def on_redraw(self):
        """Handle a change of the edited line."""
        self.check()

    def on_accept(self, accept: Optional[Callable[[], None]] = None):
        """Clear the preview, then run the host's own accept action."""
        self.clear()
        if accept is not None:
            accept()

    def on_interrupt(self):
        """Handle an interrupt of the edited line."""
        self.clear()

    def on_line_reset(self):
        """Handle a fresh, empty line being presented."""
        self.clear()
