"""Entrypoint: build the demo window and run the Qt event loop."""

from __future__ import annotations

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from hangul_ime.ui.main_window import create_main_window

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Hangul jamo composer demo")
    ap.add_argument("--settings", default=None, help="Path to settings.yaml (default: project root)")
    ap.add_argument("--debug", action="store_true", help="Log every composition transition")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication.instance() or QApplication(sys.argv)
    window = create_main_window(settings_path=args.settings)
    window.resize(640, 360)
    window.show()
    logger.info("window ready")
    return int(app.exec())


if __name__ == "__main__":
    sys.exit(main())
