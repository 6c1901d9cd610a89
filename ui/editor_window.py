# --- START OF FILE ui/editor_window.py ---
import os
import logging
from typing import Optional
from PyQt6.QtWidgets import QMainWindow, QFileDialog, QPlainTextEdit, QToolBar
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtCore import QSize

from core.config_store import ConfigStore
from core.document import load_text, save_text
from core.window_state import WindowStateController, DEFAULT_GEOMETRY

HEADER_HEIGHT = 25


class FontSizeEdit(QPlainTextEdit):
    def font_size(self) -> int:
        return self.font().pointSize()

    def set_font_size(self, size: int) -> None:
        font = self.font()
        font.setPointSize(size)
        self.setFont(font)

    def refresh(self) -> None:
        self.updateGeometry()
        self.viewport().update()


class EditorWindow(QMainWindow):
    def __init__(self, store: Optional[ConfigStore] = None):
        super().__init__()
        self.setWindowTitle("Editor")
        self.setMinimumSize(DEFAULT_GEOMETRY.width, DEFAULT_GEOMETRY.height)
        self.open_path = ""

        self.editor = FontSizeEdit()
        self.setCentralWidget(self.editor)
        self.init_ui()

        self.controller = WindowStateController(store or ConfigStore(), self, self.editor)
        self.controller.restore()

    def closeEvent(self, event):
        self.controller.save_on_exit()
        super().closeEvent(event)

    def init_ui(self):
        self.toolbar = QToolBar("Header")
        self.toolbar.setMovable(False)
        self.toolbar.setIconSize(QSize(HEADER_HEIGHT, HEADER_HEIGHT))
        self.addToolBar(self.toolbar)

        self.toolbar.addAction(self.add_action("Open", self.select_file, ["Ctrl+O"]))
        self.toolbar.addAction(self.add_action("Save", self.save_file, ["Ctrl+S"]))

        self.add_action("Increase Font Size", self.increase_font_size, ["Ctrl++", "Ctrl+="])
        self.add_action("Decrease Font Size", self.decrease_font_size, ["Ctrl+-"])

    def add_action(self, text, slot, shortcuts):
        act = QAction(text, self)
        act.setShortcuts([QKeySequence(sc) for sc in shortcuts])
        act.triggered.connect(slot)
        self.addAction(act)
        return act

    def increase_font_size(self):
        size = self.controller.increase_font_size()
        self.statusBar().showMessage(f"Font size: {size}", 2000)

    def decrease_font_size(self):
        size = self.controller.decrease_font_size()
        self.statusBar().showMessage(f"Font size: {size}", 2000)

    def select_file(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open a file", os.getcwd())
        if not path:
            logging.info("Action cancelled")
            return
        self.load_content(path)

    def load_content(self, path):
        text = load_text(path)
        if text is None:
            self.statusBar().showMessage(f"Could not open {path}", 3000)
            return
        self.editor.setPlainText(text)
        self.open_path = path
        self.setWindowTitle(f"Editor - {os.path.basename(path)}")

    def save_file(self):
        if save_text(self.open_path, self.editor.toPlainText()):
            self.statusBar().showMessage(f"Saved {self.open_path}", 2000)
# --- END OF FILE ui/editor_window.py ---
