"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Terminal-based preview using prompt_toolkit.

This package contains the terminal capabilities, the preview renderer and
session controller, and the prompt_toolkit line editor integration.
"""
from alias_preview.ui.terminal.capabilities import (PromptToolkitTerminal,
                                                    TerminalCapabilities)
from alias_preview.ui.terminal.host import PromptToolkitHost
from alias_preview.ui.terminal.mode import PreviewPosition
from alias_preview.ui.terminal.renderer import PreviewRenderer
from alias_preview.ui.terminal.session import PreviewSession
from alias_preview.ui.terminal.state import PreviewState

__all__ = [
    'PreviewState',
    'PreviewSession',
    'PreviewRenderer',
    'PreviewPosition',
    'PromptToolkitHost',
    'PromptToolkitTerminal',
    'TerminalCapabilities',
]
