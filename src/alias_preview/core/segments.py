"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Command segment splitting for the alias preview engine.

A raw input line may hold several commands joined by ';', '&&', '||' or
'|'. Each of them starts a new command position in which an alias can be
typed, so the line is cut into segments before looking anything up.
"""
import re
from typing import List, NamedTuple

# Longest separators first so '||' is never read as two pipes
SEPARATOR_PATTERN = re.compile(r"&&|\|\||\||;")
LEADING_WORD_PATTERN = re.compile(r"(\S+)(\s)?")


class Segment(NamedTuple):
    """One command position of the input line."""
    text: str
    # True when whitespace followed the leading word before trimming
    terminated: bool

    @property
    def name(self) -> str:
        """The leading word of the segment, the candidate alias name."""
        match = LEADING_WORD_PATTERN.match(self.text)
        return match.group(1) if match else ""


def tokenize(buffer: str) -> List[str]:
    """Split the buffer at command separators in a single pass.
    
    Args:
        buffer: The raw input line
        
    Returns:
        Untrimmed fragments, including empty ones
    """
    if not buffer:
        return []
    return SEPARATOR_PATTERN.split(buffer)


def make_segment(fragment: str) -> Segment:
    """Trim a fragment and record whether its leading word is complete."""
    text = fragment.lstrip()
    match = LEADING_WORD_PATTERN.match(text)
    terminated = bool(match and match.group(2))
    return Segment(text.rstrip(), terminated)


def split_segments(buffer: str) -> List[Segment]:
    """Decompose an input line into ordered, trimmed command segments.
    
    Empty segments produced by consecutive, leading or trailing
    separators are dropped.
    
    Args:
        buffer: The raw input line
        
    Returns:
        List of segments in the order they appear on the line
    """
    segments = []
    for fragment in tokenize(buffer):
        segment = make_segment(fragment)
        if segment.text:
            segments.append(segment)
    return segments
