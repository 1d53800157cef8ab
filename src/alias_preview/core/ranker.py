"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Ranking of alias candidates for progressive previews.
"""
from typing import Iterable, List, NamedTuple

from alias_preview.core.dictionary import AliasDictionaries, ShorthandEntry

MATCH_SEPARATOR = " → "


class MatchCandidate(NamedTuple):
    """An alias whose name starts with the typed prefix."""
    entry: ShorthandEntry
    is_exact: bool

    @property
    def sort_key(self):
        # Exact matches first, then shorter names, then alphabetical
        return (not self.is_exact, len(self.entry.name), self.entry.name)


def find_candidates(prefix: str, dictionaries: AliasDictionaries) -> List[MatchCandidate]:
    """Collect every alias whose name starts with the prefix, in encounter order."""
    candidates = []
    for entry in dictionaries.entries():
        if entry.name.startswith(prefix):
            candidates.append(MatchCandidate(entry, entry.name == prefix))
    return candidates


def rank_matches(prefix: str, dictionaries: AliasDictionaries, max_matches: int) -> List[ShorthandEntry]:
    """Find and order the aliases matching a partially typed name.

    Exact matches come first in the order they were found (regular aliases
    before global ones), followed by prefix matches sorted by name length
    and then alphabetically. The ordered list is truncated afterwards, so an
    exact match is never dropped in favour of a longer name.
    
    Args:
        prefix: The partially typed alias name
        dictionaries: Alias mappings to search
        max_matches: Maximum number of entries to return
        
    Returns:
        Ordered list of at most max_matches entries
        
    Raises:
        ValueError: If max_matches is not positive
    """
    if max_matches < 1:
        raise ValueError(f"max_matches must be positive, got {max_matches}")
    if not prefix:
        return []

    # sorted() is stable, which keeps duplicate exact names in encounter order
    candidates = sorted(find_candidates(prefix, dictionaries), key=lambda c: c.sort_key)
    return [candidate.entry for candidate in candidates[:max_matches]]


def format_matches(entries: Iterable[ShorthandEntry]) -> str:
    """Format ranked entries as preview lines, one 'name → expansion' per entry."""
    return "\n".join(f"{entry.name}{MATCH_SEPARATOR}{entry.expansion}" for entry in entries)
