import pyperclip

from lorebook_reader.utils import clipboard_manager


def test_copy_success(monkeypatch):
    copied = []
    monkeypatch.setattr(clipboard_manager.pyperclip, "copy", copied.append)

    assert clipboard_manager.copy_to_clipboard("Page(s): 3 - 4") is True
    assert copied == ["Page(s): 3 - 4"]


def test_copy_without_clipboard_reports_failure(monkeypatch):
    def fail(_text):
        raise pyperclip.PyperclipException("no clipboard")

    monkeypatch.setattr(clipboard_manager.pyperclip, "copy", fail)

    assert clipboard_manager.copy_to_clipboard("text") is False
