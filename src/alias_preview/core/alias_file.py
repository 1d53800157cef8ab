"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Alias definition parsing.

Reads shell style alias definitions so the demo shell can be started with
the user's aliases:

    alias ga='git add' gp='git push'
    alias -g G='| grep'

Definitions made with -g are global aliases.
"""
import re
import shlex
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from alias_preview.core.dictionary import ShorthandEntry
from alias_preview.core.exceptions import AliasDefinitionError
from alias_preview.utils.logging_config import get_logger

INVALID_NAME_PATTERN = re.compile(r"[\s=]")

logger = get_logger(__name__)


def validate_alias_name(name: str) -> bool:
    """Check that an alias name is non-empty and has no whitespace or '='."""
    return bool(name) and not INVALID_NAME_PATTERN.search(name)


def parse_definition(word: str, path: str = None, line_number: int = None) -> ShorthandEntry:
    """Parse a single 'name=expansion' word."""
    name, separator, expansion = word.partition("=")
    if not separator:
        raise AliasDefinitionError(f"Expected name=value, got '{word}'", path, line_number)
    if not validate_alias_name(name):
        raise AliasDefinitionError(f"Invalid alias name '{name}'", path, line_number)
    return ShorthandEntry(name, expansion)


def parse_alias_words(words: List[str], path: str = None,
                      line_number: int = None) -> Tuple[bool, List[ShorthandEntry]]:
    """Parse the arguments of an alias command.
    
    Args:
        words: Shell words following 'alias'
        path: File the words come from, for error messages
        line_number: Line the words come from, for error messages
        
    Returns:
        Tuple of (is_global, entries); entries is empty when no definition was given
    """
    is_global = False
    index = 0
    while index < len(words) and words[index].startswith("-"):
        option = words[index]
        index += 1
        if option == "--":
            break
        if option == "-g":
            is_global = True
        else:
            raise AliasDefinitionError(f"Unsupported alias option '{option}'", path, line_number)

    entries = [parse_definition(word, path, line_number) for word in words[index:]]
    return is_global, entries


def split_words(text: str, path: str = None, line_number: int = None) -> List[str]:
    """Split a line into shell words, honouring quotes and comments."""
    try:
        return shlex.split(text, comments=True)
    except ValueError as e:
        raise AliasDefinitionError(f"Cannot parse '{text.strip()}': {e}", path, line_number) from e


def parse_alias_line(line: str, path: str = None,
                     line_number: int = None) -> Tuple[bool, List[ShorthandEntry]]:
    """Parse one line of an alias file.
    
    Blank lines and comments yield no entries.
    
    Raises:
        AliasDefinitionError: If the line is not a valid alias definition
    """
    words = split_words(line, path, line_number)
    if not words:
        return False, []
    if words[0] != "alias":
        raise AliasDefinitionError(f"Expected an alias definition, got '{words[0]}'", path, line_number)
    is_global, entries = parse_alias_words(words[1:], path, line_number)
    if not entries:
        raise AliasDefinitionError("Alias definition without name=value", path, line_number)
    return is_global, entries


def load_alias_file(path, primary: Optional[Dict[str, str]] = None,
                    fallback: Optional[Dict[str, str]] = None) -> Tuple[Dict[str, str], Dict[str, str]]:
    """Load alias definitions from a file.
    
    Args:
        path: File with one or more 'alias' lines
        primary: Regular aliases to add to, a new dict by default
        fallback: Global aliases to add to, a new dict by default
        
    Returns:
        Tuple of (regular aliases, global aliases)
        
    Raises:
        AliasDefinitionError: If the file cannot be read or holds an invalid line
    """
    primary = {} if primary is None else primary
    fallback = {} if fallback is None else fallback
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise AliasDefinitionError(f"Cannot read alias file: {e.strerror}", str(path)) from e

    count = 0
    for line_number, line in enumerate(text.splitlines(), 1):
        is_global, entries = parse_alias_line(line, str(path), line_number)
        target = fallback if is_global else primary
        for entry in entries:
            target[entry.name] = entry.expansion
            count += 1

    logger.info(f"Loaded {count} alias definition(s) from {path}")
    return primary, fallback
