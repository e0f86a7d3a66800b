import pytest

from linkgopher.clipboard_manager import ClipboardAccessError


class FakeClipboard:
    """In-memory clipboard. Set fail_read / fail_write to simulate a locked clipboard."""

    def __init__(self, text="", fail_read=False, fail_write=False):
        self.text = text
        self.fail_read = fail_read
        self.fail_write = fail_write
        self.writes = []

    def read_text(self):
        if self.fail_read:
            raise ClipboardAccessError("clipboard unavailable")
        return self.text

    def write_text(self, text):
        if self.fail_write:
            raise ClipboardAccessError("clipboard unavailable")
        self.writes.append(text)
        self.text = text


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.config and LINKGOPHER_* settings."""
    config_file = tmp_path / "config" / "config.json"
    monkeypatch.setenv("LINKGOPHER_CONFIG", str(config_file))
    for name in ("LINKGOPHER_TITLE", "LINKGOPHER_COPY_TO_CLIPBOARD", "LINKGOPHER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return config_file


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()
