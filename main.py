import argparse
import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

from hangul_rr.services.settings_store import SettingsStore
from hangul_rr.ui.composer_window import create_composer_window


def _configure_logging(settings: SettingsStore) -> None:
    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compose Hangul from romanized input.")
    parser.add_argument(
        "--settings",
        default=None,
        help="path to settings.yaml (default: next to main.py)",
    )
    args = parser.parse_args(argv)

    settings_path = args.settings or os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.yaml")
    settings = SettingsStore(settings_path)
    _configure_logging(settings)

    app = QApplication.instance() or QApplication(sys.argv)
    window = create_composer_window(settings_path=settings_path)
    window.resize(820, 560)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
