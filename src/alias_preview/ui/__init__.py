"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

UI package for the Alias Preview application.

This package contains the terminal preview components and the resources
used by the demo shell.
"""
from alias_preview.ui.resources import Emojis
from alias_preview.ui.terminal import (PreviewPosition, PreviewRenderer,
                                       PreviewSession, PromptToolkitHost)

__all__ = [
    # Core UI classes
    'PreviewSession',
    'PreviewRenderer',
    'PreviewPosition',
    'PromptToolkitHost',
    
    # Resources
    'Emojis',
]
