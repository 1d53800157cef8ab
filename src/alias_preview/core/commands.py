"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Built-in commands of the alias preview demo shell.

This module handles recognition and parsing of the shell's own commands,
which manage the aliases shown in the preview. Any other input is an
ordinary command line and is not parsed here.
"""
import re
from typing import Dict, List, Optional

from alias_preview.core.alias_file import parse_alias_words, split_words, validate_alias_name
from alias_preview.core.exceptions import AliasDefinitionError


class Command:
    """Base class for all commands."""
    
    def __init__(self, text: str, args: List[str]):
        self.text = text
        self.args = args
        
    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.args})"


class AliasCommand(Command):
    """Command to define aliases, or list them when no definition is given."""
    
    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)
        self.is_global, self.entries = parse_alias_words(args[1:])

    @property
    def is_listing(self) -> bool:
        return not self.entries


class UnaliasCommand(Command):
    """Command to remove aliases."""
    
    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)
        self.is_global = False
        self.names = []

        for arg in args[1:]:
            if arg == "-g":
                self.is_global = True
            elif arg.startswith("-"):
                raise AliasDefinitionError(f"Unsupported unalias option '{arg}'")
            elif validate_alias_name(arg):
                self.names.append(arg)
            else:
                raise AliasDefinitionError(f"Invalid alias name '{arg}'")

        if not self.names:
            raise AliasDefinitionError("unalias: missing alias name")


class ListAliasesCommand(Command):
    """Command to list regular and global aliases."""
    pass


class HelpCommand(Command):
    """Command to show help information."""
    pass


class ExitCommand(Command):
    """Command to exit the shell."""
    pass


class CommandManager:
    """Recognizes the shell's built-in commands."""
    
    def __init__(self):
        self.command_patterns: Dict[str, type] = {
            r'^alias(\s.*)?$': AliasCommand,
            r'^unalias(\s.*)?$': UnaliasCommand,
            r'^aliases$': ListAliasesCommand,
            r'^help$': HelpCommand,
            r'^(exit|quit)$': ExitCommand,
        }
    
    def parse_input(self, text: str) -> Optional[Command]:
        """Parse input to determine if it's a built-in command.
        
        Args:
            text: Input text
            
        Returns:
            Command object if input is a built-in command, None otherwise
            
        Raises:
            AliasDefinitionError: If an alias or unalias command is malformed
        """
        if not text:
            return None

        text = text.strip()
        for pattern, command_class in self.command_patterns.items():
            if re.match(pattern, text, re.DOTALL):
                return command_class(text, split_words(text))

        return None
