"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Preview state management for the terminal UI.

This module provides the PreviewState class recording what the renderer
has drawn. It is the only record of the preview lines on screen, since
the terminal cannot be read back.
"""


class PreviewState:
    """What is currently displayed as preview."""
    
    def __init__(self):
        self.text = ""
        # Number of preview lines on screen; 0 means no preview is shown
        self.line_count = 0

    @property
    def is_displayed(self) -> bool:
        return self.line_count > 0

    def update(self, text: str, line_count: int):
        """Record a freshly drawn preview."""
        self.text = text
        self.line_count = line_count

    def reset(self):
        """Record that no preview is displayed."""
        self.text = ""
        self.line_count = 0

    def __eq__(self, other):
        if not isinstance(other, PreviewState):
            return NotImplemented
        return (self.text, self.line_count) == (other.text, other.line_count)

    def __repr__(self):
        return f"PreviewState(text={self.text!r}, line_count={self.line_count})"
