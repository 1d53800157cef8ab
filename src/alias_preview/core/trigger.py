"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Trigger policies deciding when and what to preview.

Three modes are supported:
- space: preview an alias once it is followed by whitespace
- instant: preview as soon as the leading word is exactly an alias name
- progressive: preview every alias the leading word is a prefix of
"""
import enum
from typing import Iterable, Optional

from alias_preview.core.dictionary import AliasDictionaries
from alias_preview.core.ranker import format_matches, rank_matches
from alias_preview.core.segments import Segment
from alias_preview.utils.logging_config import get_logger

logger = get_logger(__name__)


class TriggerMode(enum.Enum):
    """Enumeration of trigger modes for the preview."""
    SPACE = "space"
    INSTANT = "instant"
    PROGRESSIVE = "progressive"

    @classmethod
    def parse(cls, value) -> "TriggerMode":
        """Parse a trigger mode, falling back to SPACE for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.warning(f"Unknown trigger mode '{value}', falling back to '{cls.SPACE.value}'")
            return cls.SPACE


class TriggerPolicy:
    """Evaluates command segments against the alias dictionaries."""

    def __init__(self, mode=TriggerMode.SPACE, max_matches: int = 3):
        if max_matches < 1:
            raise ValueError(f"max_matches must be positive, got {max_matches}")
        self.mode = TriggerMode.parse(mode)
        self.max_matches = max_matches

    @property
    def max_lines(self) -> int:
        """Preview lines taken by a one-line expansion or a full match list."""
        if self.mode == TriggerMode.PROGRESSIVE:
            return self.max_matches
        return 1

    def evaluate(self, segments: Iterable[Segment], dictionaries: AliasDictionaries) -> Optional[str]:
        """Find the preview content for the first segment with a hit.
        
        Segments after the first hit are not evaluated.
        
        Args:
            segments: Command segments in line order
            dictionaries: Alias mappings to resolve names against
            
        Returns:
            Preview content, or None when no segment matches
        """
        for segment in segments:
            content = self.evaluate_segment(segment, dictionaries)
            if content:
                logger.debug(f"Preview hit for '{segment.name}' in {self.mode.value} mode")
                return content
        return None

    def evaluate_segment(self, segment: Segment, dictionaries: AliasDictionaries) -> Optional[str]:
        """Evaluate a single segment according to the trigger mode."""
        potential_alias = segment.name
        if not potential_alias:
            return None

        match self.mode:
            case TriggerMode.PROGRESSIVE:
                matches = rank_matches(potential_alias, dictionaries, self.max_matches)
                return format_matches(matches) if matches else None
            case TriggerMode.INSTANT:
                return dictionaries.lookup(potential_alias)
            case _:
                # Space mode waits until the name is followed by whitespace
                if not segment.terminated:
                    return None
                return dictionaries.lookup(potential_alias)
