"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Preview position management for the terminal UI.

This module provides the PreviewPosition enum to select on which side of
the edited line the preview is drawn.
"""
import enum


class PreviewPosition(enum.Enum):
    """Enumeration of positions for the preview lines."""
    ABOVE = "above"
    BELOW = "below"
