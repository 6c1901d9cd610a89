# --- START OF FILE main.py ---
import sys
import logging
from PyQt6.QtWidgets import QApplication
from core.config_store import ConfigStore, CONFIG_PATH
from ui.editor_window import EditorWindow


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = EditorWindow(ConfigStore(CONFIG_PATH))
    window.show()

    sys.exit(app.exec())

if __name__ == '__main__':
    main()
# --- END OF FILE main.py ---
