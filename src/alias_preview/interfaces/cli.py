"""
Copyright (c) 2025 Jakob Bolliger

This file is part of Alias Preview.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

CLI interface for the Alias Preview application.

This module provides a small interactive shell that shows alias previews
while typing. It owns the alias dictionaries and manages them through
built-in commands; other lines are echoed back, never executed.
"""
from typing import Dict, Optional

from prompt_toolkit.input import Input
from prompt_toolkit.output import Output

from alias_preview.config import SHELL_PROMPT
from alias_preview.core.commands import (AliasCommand, Command, CommandManager,
                                         ExitCommand, HelpCommand,
                                         ListAliasesCommand, UnaliasCommand)
from alias_preview.core.dictionary import AliasDictionaries
from alias_preview.core.exceptions import AliasDefinitionError
from alias_preview.ui.resources import (BOXED_BANNER, HELP_TEXT, Emojis,
                                        format_alias, format_error_message,
                                        format_warning_message)
from alias_preview.ui.terminal import PromptToolkitHost
from alias_preview.utils.logging_config import get_logger


class CliInterface:
    """CLI interface for the Alias Preview application."""
    
    def __init__(self, config, aliases: Optional[Dict[str, str]] = None,
                 global_aliases: Optional[Dict[str, str]] = None,
                 input: Optional[Input] = None, output: Optional[Output] = None):
        """Initialize the CLI interface.
        
        Args:
            config: PreviewConfig with the preview settings
            aliases: Regular aliases, modified in place by alias/unalias
            global_aliases: Global aliases, modified in place by alias -g/unalias -g
            input: prompt_toolkit input, the terminal by default
            output: prompt_toolkit output, the terminal by default
        """
        self.config = config
        self.aliases = aliases if aliases is not None else {}
        self.global_aliases = global_aliases if global_aliases is not None else {}
        self.logger = get_logger(__name__)
        
        self.command_manager = CommandManager()
        self.dictionaries = AliasDictionaries(self.aliases, self.global_aliases)
        
        # Create line editor instance
        self.host = PromptToolkitHost(
            self.dictionaries,
            config,
            message=SHELL_PROMPT,
            input=input,
            output=output,
        )
    
    def interactive_session(self):
        """Run the shell until exit, quit or Ctrl+D."""
        print(BOXED_BANNER)
        print(f"\n{Emojis.ALIAS} {len(self.aliases)} alias(es), "
              f"{len(self.global_aliases)} global alias(es) loaded. Type 'help' for help.\n")
        self.logger.info(f"Interactive session started with {self.config!r}")
        
        while True:
            try:
                line = self.host.prompt()
            except KeyboardInterrupt:
                # The preview was erased by the interrupt binding
                continue
            except EOFError:
                break

            if not self.handle_line(line):
                break
        
        print(f"\n{Emojis.BYE} Goodbye!")
        self.logger.info("Interactive session ended")
    
    def handle_line(self, line: str) -> bool:
        """Handle an accepted line.
        
        Args:
            line: The accepted line
            
        Returns:
            False when the shell should exit, True otherwise
        """
        if not line.strip():
            return True
        
        try:
            command = self.command_manager.parse_input(line)
        except AliasDefinitionError as e:
            self.logger.warning(f"Rejected command '{line}': {e}")
            print(format_error_message(str(e)))
            return True
        
        if command is None:
            print(f"{Emojis.ACCEPTED} {line}")
            return True
        
        return self._handle_command(command)
    
    def _handle_command(self, command: Command) -> bool:
        """Execute a built-in command."""
        self.logger.debug(f"Handling command: {command}")
        
        match command:
            case ExitCommand():
                return False
            case HelpCommand():
                print(HELP_TEXT)
            case ListAliasesCommand():
                self._print_aliases(self.aliases)
                self._print_aliases(self.global_aliases, is_global=True)
            case AliasCommand() if command.is_listing:
                self._print_aliases(self.global_aliases if command.is_global else self.aliases,
                                    is_global=command.is_global)
            case AliasCommand():
                target = self.global_aliases if command.is_global else self.aliases
                for entry in command.entries:
                    target[entry.name] = entry.expansion
                    self.logger.info(f"Defined {'global ' if command.is_global else ''}alias {entry.name}")
                print(f"{Emojis.CHECK} Defined {len(command.entries)} alias(es).")
            case UnaliasCommand():
                self._remove_aliases(command)
        return True
    
    def _remove_aliases(self, command: UnaliasCommand):
        target = self.global_aliases if command.is_global else self.aliases
        for name in command.names:
            if name in target:
                del target[name]
                self.logger.info(f"Removed alias {name}")
            else:
                print(format_warning_message(f"No such alias: {name}"))
    
    def _print_aliases(self, aliases: Dict[str, str], is_global: bool = False):
        emoji = Emojis.GLOBAL if is_global else Emojis.ALIAS
        title = "Global aliases" if is_global else "Aliases"
        
        if not aliases:
            print(f"{emoji} {title}: none")
            return
        
        print(f"{emoji} {title}:")
        for name in sorted(aliases):
            print(f"    {format_alias(name, aliases[name])}")
