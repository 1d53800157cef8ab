"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

UI resources for the Alias Preview application.

This module contains centralized UI elements like banners, help text and
message formatting used by the demo shell.
"""

# Emoji constants
class Emojis:
    """Class containing emoji constants to ensure consistent usage throughout the code."""
    CHECK = "✓"
    WARNING = "⚠️"
    ERROR = "❌"
    INFO = "ℹ️"
    BYE = "👋"
    BULLET = "•"
    ALIAS = "🔗"
    GLOBAL = "🌐"
    ACCEPTED = "⏎"


# Boxed banner shown when the demo shell starts
BOXED_BANNER = r"""
╔══════════════════════════════════════════════════════════╗
║                                                          ║
║                      ALIAS PREVIEW                       ║
║          See what your aliases expand to as you type     ║
║                                                          ║
╚══════════════════════════════════════════════════════════╝"""

# Help text for the demo shell
HELP_TEXT = """
KEYBINDINGS:
    Enter: Accept the line (the preview is erased first)
    Ctrl+C: Abandon the line
    Ctrl+L: Clear the screen
    Ctrl+D: Exit the shell (on an empty line)

COMMANDS:
    alias: List regular aliases
    alias -g: List global aliases
    alias name='expansion' [name2=...]: Define regular aliases
    alias -g name='expansion': Define a global alias
    unalias [-g] name [name2 ...]: Remove aliases
    aliases: List all aliases
    help: Show this help message
    exit, quit: Exit the shell

Any other line is echoed back and never executed.

TRIGGER MODES:
    space: Preview once an alias name is followed by a space
    instant: Preview as soon as the word is an alias name
    progressive: Preview every alias starting with the typed word
"""


# Standardized Message Formatting Functions
def format_error_message(message: str) -> str:
    """Format an error message with consistent emoji and structure.
    
    Args:
        message: The error message content
        
    Returns:
        Formatted error message string
    """
    return f"\n{Emojis.ERROR} {message}"


def format_warning_message(message: str) -> str:
    """Format a warning message with consistent emoji and structure."""
    return f"\n{Emojis.WARNING} {message}"


def format_alias(name: str, expansion: str) -> str:
    """Format an alias definition the way a shell prints it."""
    quoted = expansion.replace("'", "'\\''")
    return f"{name}='{quoted}'"
