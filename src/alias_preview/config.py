"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Configuration settings for the alias preview application.
All constants and configuration variables are defined here.
"""
import os
from typing import Mapping, Optional

from prompt_toolkit.styles import parse_color

from alias_preview.core.exceptions import ConfigurationError
from alias_preview.core.trigger import TriggerMode
from alias_preview.ui.terminal.mode import PreviewPosition
from alias_preview.utils.logging_config import get_logger

# Preview defaults (same names and values as the zsh plugin)
DEFAULT_POSITION = "above"
DEFAULT_PREFIX = "→ "
DEFAULT_COLOR = "cyan"
DEFAULT_TRIGGER = "space"
DEFAULT_MAX_MATCHES = 3

# Environment variables
ENV_POSITION = "ALIAS_PREVIEW_POSITION"
ENV_PREFIX = "ALIAS_PREVIEW_PREFIX"
ENV_COLOR = "ALIAS_PREVIEW_COLOR"
ENV_TRIGGER = "ALIAS_PREVIEW_TRIGGER"
ENV_MAX_MATCHES = "ALIAS_PREVIEW_MAX_MATCHES"

# Demo shell
SHELL_PROMPT = "alias-preview> "

# Terminal color names and their prompt_toolkit equivalents
TERMINAL_COLORS = {
    "black": "ansiblack",
    "red": "ansired",
    "green": "ansigreen",
    "yellow": "ansiyellow",
    "blue": "ansiblue",
    "magenta": "ansimagenta",
    "cyan": "ansicyan",
    "white": "ansigray",
    "brightblack": "ansibrightblack",
    "brightred": "ansibrightred",
    "brightgreen": "ansibrightgreen",
    "brightyellow": "ansibrightyellow",
    "brightblue": "ansibrightblue",
    "brightmagenta": "ansibrightmagenta",
    "brightcyan": "ansibrightcyan",
    "brightwhite": "ansiwhite",
}

logger = get_logger(__name__)


def resolve_color(name: str) -> str:
    """Translate a color name into a prompt_toolkit color.

    Args:
        name: Terminal color name (e.g. "cyan"), ansi name, hex value or web color

    Returns:
        Color string accepted by prompt_toolkit attributes

    Raises:
        ConfigurationError: If the color is not recognized
    """
    key = name.strip().lower()
    if key in TERMINAL_COLORS:
        return TERMINAL_COLORS[key]
    try:
        return parse_color(key)
    except ValueError as e:
        raise ConfigurationError(f"Unknown color '{name}'", option="color") from e


def parse_position(value) -> PreviewPosition:
    """Parse a preview position, raising ConfigurationError when invalid."""
    if isinstance(value, PreviewPosition):
        return value
    try:
        return PreviewPosition(str(value).strip().lower())
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid position '{value}', expected 'above' or 'below'", option="position"
        ) from e


def parse_max_matches(value) -> int:
    """Parse the maximum number of progressive matches."""
    try:
        max_matches = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"Invalid max matches '{value}', expected a positive integer", option="max_matches"
        ) from e
    if max_matches < 1:
        raise ConfigurationError(
            f"Invalid max matches '{value}', expected a positive integer", option="max_matches"
        )
    return max_matches


class PreviewConfig:
    """Settings for how and when the alias preview is displayed."""

    def __init__(self, position=DEFAULT_POSITION, prefix: str = DEFAULT_PREFIX,
                 color: str = DEFAULT_COLOR, trigger=DEFAULT_TRIGGER,
                 max_matches=DEFAULT_MAX_MATCHES):
        """Initialize and validate the configuration.
        
        Args:
            position: "above" or "below" the edited line
            prefix: Text prepended to the first preview line
            color: Color applied to all preview text
            trigger: "space", "instant" or "progressive"; unknown values fall back to "space"
            max_matches: Maximum number of matches shown in progressive mode
            
        Raises:
            ConfigurationError: If position, color or max_matches is invalid
        """
        self.position = parse_position(position)
        self.prefix = prefix
        self.color_name = color
        self.color = resolve_color(color)
        self.trigger = TriggerMode.parse(trigger)
        self.max_matches = parse_max_matches(max_matches)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PreviewConfig":
        """Build a configuration from ALIAS_PREVIEW_* environment variables.

        Invalid values are logged and replaced by their defaults.
        """
        environ = os.environ if environ is None else environ

        position = environ.get(ENV_POSITION, DEFAULT_POSITION)
        try:
            parse_position(position)
        except ConfigurationError as e:
            logger.warning(f"{e}; using '{DEFAULT_POSITION}'")
            position = DEFAULT_POSITION

        color = environ.get(ENV_COLOR, DEFAULT_COLOR)
        try:
            resolve_color(color)
        except ConfigurationError as e:
            logger.warning(f"{e}; using '{DEFAULT_COLOR}'")
            color = DEFAULT_COLOR

        max_matches = environ.get(ENV_MAX_MATCHES, DEFAULT_MAX_MATCHES)
        try:
            parse_max_matches(max_matches)
        except ConfigurationError as e:
            logger.warning(f"{e}; using {DEFAULT_MAX_MATCHES}")
            max_matches = DEFAULT_MAX_MATCHES

        return cls(
            position=position,
            prefix=environ.get(ENV_PREFIX, DEFAULT_PREFIX),
            color=color,
            trigger=environ.get(ENV_TRIGGER, DEFAULT_TRIGGER),
            max_matches=max_matches,
        )

    def __repr__(self):
        return (f"PreviewConfig(position={self.position.value!r}, prefix={self.prefix!r}, "
                f"color={self.color_name!r}, trigger={self.trigger.value!r}, "
                f"max_matches={self.max_matches})")
