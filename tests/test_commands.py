"""Tests for the demo shell's built-in command parsing."""

import pytest

from alias_preview.core.commands import (AliasCommand, CommandManager,
                                         ExitCommand, HelpCommand,
                                         ListAliasesCommand, UnaliasCommand)
from alias_preview.core.dictionary import ShorthandEntry
from alias_preview.core.exceptions import AliasDefinitionError


@pytest.fixture
def manager():
    return CommandManager()


class TestCommandManager:
    """Test CommandManager.parse_input."""

    @pytest.mark.parametrize("text", ["", "ls -la", "ga file", "aliasx", "git alias"])
    def test_ordinary_lines_are_not_commands(self, manager, text):
        assert manager.parse_input(text) is None

    def test_alias_listing(self, manager):
        command = manager.parse_input("alias")

        assert isinstance(command, AliasCommand)
        assert command.is_listing
        assert command.is_global is False

    def test_global_alias_listing(self, manager):
        command = manager.parse_input("alias -g")

        assert command.is_listing
        assert command.is_global is True

    def test_alias_definition(self, manager):
        command = manager.parse_input("alias ga='git add' gp='git push'")

        assert not command.is_listing
        assert command.entries == [ShorthandEntry("ga", "git add"), ShorthandEntry("gp", "git push")]

    def test_global_alias_definition(self, manager):
        command = manager.parse_input("  alias -g G='| grep'  ")

        assert command.is_global is True
        assert command.entries == [ShorthandEntry("G", "| grep")]

    def test_malformed_alias(self, manager):
        with pytest.raises(AliasDefinitionError):
            manager.parse_input("alias ga")

    def test_unalias(self, manager):
        command = manager.parse_input("unalias -g G L")

        assert isinstance(command, UnaliasCommand)
        assert command.is_global is True
        assert command.names == ["G", "L"]

    def test_unalias_without_names(self, manager):
        with pytest.raises(AliasDefinitionError):
            manager.parse_input("unalias")

    @pytest.mark.parametrize("text,command_class", [
        ("aliases", ListAliasesCommand),
        ("help", HelpCommand),
        ("exit", ExitCommand),
        ("quit", ExitCommand),
    ])
    def test_simple_commands(self, manager, text, command_class):
        assert isinstance(manager.parse_input(text), command_class)
