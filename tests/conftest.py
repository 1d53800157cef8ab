"""Shared pytest configuration and fixtures for Alias Preview tests."""

import os
import tempfile

# Keep test logs out of the home directory; must happen before the package is imported
os.environ.setdefault("ALIAS_PREVIEW_LOG_DIR", tempfile.mkdtemp(prefix="alias-preview-logs-"))

import pytest

from alias_preview.core.dictionary import AliasDictionaries
from alias_preview.core.trigger import TriggerMode, TriggerPolicy
from alias_preview.ui.terminal.capabilities import TerminalCapabilities
from alias_preview.ui.terminal.mode import PreviewPosition
from alias_preview.ui.terminal.renderer import PreviewRenderer
from alias_preview.ui.terminal.session import PreviewSession


class RecordingTerminal(TerminalCapabilities):
    """Terminal double recording every capability call and tracking the cursor row."""

    def __init__(self):
        self.calls = []
        self.row = 0
        self._saved_rows = []

    def cursor_up(self):
        self.calls.append(("up",))
        self.row -= 1

    def cursor_down(self):
        self.calls.append(("down",))
        self.row += 1

    def erase_line(self):
        self.calls.append(("erase",))

    def save_cursor(self):
        self.calls.append(("save",))
        self._saved_rows.append(self.row)

    def restore_cursor(self):
        self.calls.append(("restore",))
        self.row = self._saved_rows.pop()

    def write_colored(self, text, color):
        self.calls.append(("write", text, color))

    def flush(self):
        self.calls.append(("flush",))

    @property
    def written(self):
        return [call[1] for call in self.calls if call[0] == "write"]

    def count(self, name):
        return sum(1 for call in self.calls if call[0] == name)


class FakeBuffer:
    """Stands in for the host's line buffer."""

    def __init__(self, text=""):
        self.text = text

    def __call__(self):
        return self.text


@pytest.fixture
def terminal():
    return RecordingTerminal()


@pytest.fixture
def aliases():
    return {"ga": "git add", "gaa": "git add --all", "gap": "git add -p", "gp": "git push"}


@pytest.fixture
def global_aliases():
    return {"G": "| grep", "L": "| less"}


@pytest.fixture
def dictionaries(aliases, global_aliases):
    return AliasDictionaries(aliases, global_aliases)


@pytest.fixture
def buffer():
    return FakeBuffer()


@pytest.fixture
def make_session(terminal, buffer, dictionaries):
    """Build a PreviewSession on the recording terminal."""

    def _make(trigger=TriggerMode.SPACE, position=PreviewPosition.ABOVE, max_matches=3):
        renderer = PreviewRenderer(terminal, position=position, prefix="→ ", color="ansicyan")
        policy = TriggerPolicy(trigger, max_matches)
        return PreviewSession(buffer, dictionaries, renderer, policy)

    return _make
