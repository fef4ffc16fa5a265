import logging
import sys

from PySide6.QtWidgets import QApplication

from core.config import get_settings
from gui import MainWindow


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = MainWindow(settings)
    window.resize(420, 520)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
