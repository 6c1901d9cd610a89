"""Smoke tests for ui/editor_window.py on the offscreen Qt platform"""
import os
import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from core.config_store import ConfigStore  # noqa: E402
from ui.editor_window import EditorWindow  # noqa: E402


@pytest.fixture(scope="module")
def app():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def cfg_path(tmp_path):
    p = tmp_path / "editor.cfg"
    p.write_text("40\n10 10 800 600 0", encoding="utf-8")
    return str(p)


def test_window_restores_font_and_size(app, cfg_path):
    window = EditorWindow(ConfigStore(cfg_path))
    assert window.editor.font_size() == 40
    assert (window.width(), window.height()) == (800, 600)


def test_font_shortcut_persists(app, cfg_path):
    window = EditorWindow(ConfigStore(cfg_path))
    window.increase_font_size()
    assert window.editor.font_size() == 45
    with open(cfg_path, encoding="utf-8") as f:
        assert f.read() == "45\n10 10 800 600 0"


def test_load_content(app, cfg_path, tmp_path):
    doc = tmp_path / "doc.txt"
    doc.write_text("line one", encoding="utf-8")
    window = EditorWindow(ConfigStore(cfg_path))
    window.load_content(str(doc))
    assert window.editor.toPlainText() == "line one\n"
    assert window.open_path == str(doc)


def test_window_uses_default_store(app, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    window = EditorWindow()
    assert window.controller.store.path == "editor.cfg"
    assert (tmp_path / "editor.cfg").read_text(encoding="utf-8") == "15"
