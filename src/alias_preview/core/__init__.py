"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Core functionality for the Alias Preview application.

This package contains the matching engine (segment splitting, alias
lookup, ranking and trigger policies), alias definition parsing, the demo
shell's commands and exception handling.
"""
from alias_preview.core.alias_file import load_alias_file, parse_alias_line
from alias_preview.core.commands import Command, CommandManager
from alias_preview.core.dictionary import AliasDictionaries, ShorthandEntry
from alias_preview.core.exceptions import (AliasDefinitionError,
                                           AliasPreviewError,
                                           ConfigurationError)
from alias_preview.core.ranker import MatchCandidate, format_matches, rank_matches
from alias_preview.core.segments import Segment, split_segments
from alias_preview.core.trigger import TriggerMode, TriggerPolicy

__all__ = [
    'AliasDictionaries',
    'ShorthandEntry',
    'Segment',
    'split_segments',
    'MatchCandidate',
    'rank_matches',
    'format_matches',
    'TriggerMode',
    'TriggerPolicy',
    'load_alias_file',
    'parse_alias_line',
    'Command',
    'CommandManager',
    'AliasPreviewError',
    'ConfigurationError',
    'AliasDefinitionError',
]
