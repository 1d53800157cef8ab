"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Alias dictionary lookup.

The host owns two mappings of alias name to expansion: regular aliases
and global aliases. This module only reads them, fetching values by key
on every call so that changes made by the host are always visible.
"""
from typing import Iterator, Mapping, NamedTuple, Optional


class ShorthandEntry(NamedTuple):
    """An alias name and the text it expands to."""
    name: str
    expansion: str


class AliasDictionaries:
    """Read-only view over the host's regular and global alias mappings."""

    def __init__(self, primary: Optional[Mapping[str, str]] = None,
                 fallback: Optional[Mapping[str, str]] = None):
        """Wrap the host mappings without copying them.
        
        Args:
            primary: Regular aliases, consulted first
            fallback: Global aliases, consulted when the primary mapping has no entry
        """
        self.primary = primary if primary is not None else {}
        self.fallback = fallback if fallback is not None else {}

    def lookup(self, name: str) -> Optional[str]:
        """Resolve the expansion of an alias by exact name.
        
        Args:
            name: Candidate alias name
            
        Returns:
            The expansion from the primary mapping, else from the fallback
            mapping, or None if neither defines the name
        """
        if not name:
            return None
        if name in self.primary:
            return self.primary[name]
        if name in self.fallback:
            return self.fallback[name]
        return None

    def entries(self) -> Iterator[ShorthandEntry]:
        """Yield every alias, primary mapping first."""
        for mapping in (self.primary, self.fallback):
            for name in list(mapping.keys()):
                yield ShorthandEntry(name, mapping[name])

    def __contains__(self, name) -> bool:
        return self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self.primary) + len(self.fallback)
