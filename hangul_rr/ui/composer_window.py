"""Composer window factory.

Public API:
- create_composer_window(...): builds and returns the composer window without
  starting the Qt event loop, so tests can instantiate it headlessly.

QApplication creation and app.exec() stay in `main.py`.
"""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from hangul_rr.controllers.composer_controller import ComposerController
from hangul_rr.controllers.rr_input_ui_controller import RrInputUiController
from hangul_rr.domain.hangul_parser import HangulParser
from hangul_rr.domain.jamo import Jamo
from hangul_rr.domain.romanization import rr
from hangul_rr.services.settings_store import SettingsStore
from hangul_rr.services.vocabulary_log import VocabularyLog


# Reference table rows: basic consonants (initial/final) beside basic vowels
_INFO_CONSONANTS = (
    Jamo.G, Jamo.N, Jamo.D, Jamo.R, Jamo.M, Jamo.B, Jamo.S,
    Jamo.SILENT, Jamo.J, Jamo.CH, Jamo.K, Jamo.T, Jamo.P, Jamo.H,
)
_INFO_VOWELS = (
    Jamo.A, Jamo.AE, Jamo.YA, Jamo.YAE, Jamo.EO, Jamo.E, Jamo.YEO,
    Jamo.YE, Jamo.O, Jamo.YO, Jamo.U, Jamo.YU, Jamo.EU, Jamo.I,
)


def jamo_info_text() -> str:
    lines = ["{:<22}{}".format("Initials/Finals", "Medials")]
    for c, v in zip(_INFO_CONSONANTS, _INFO_VOWELS):
        lines.append("{} {:<20}{} {}".format(c, rr(c), v, rr(v)))
    return "\n".join(lines)


def _mk_title_label(text: str, *, point_size: int = 12, bold: bool = True) -> QLabel:
    lbl = QLabel(text)
    f = QFont()
    f.setPointSize(int(point_size))
    f.setBold(bool(bold))
    lbl.setFont(f)
    lbl.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)
    return lbl


def _mk_row(title: str, body: QWidget) -> QHBoxLayout:
    row = QHBoxLayout()
    row.setSpacing(8)
    lbl = _mk_title_label(title)
    lbl.setFixedWidth(70)
    row.addWidget(lbl)
    row.addWidget(body, 1)
    return row


def create_composer_window(*, settings_path: str | Path | None = None) -> QWidget:
    """Create and return the composer window.

    This function must NOT call app.exec(). It assumes a QApplication exists.
    The UI controller is attached as `window._controller` for tests.

    Args:
        settings_path: Optional settings.yaml; defaults to the project root one.
    """
    settings = SettingsStore(settings_path)
    parser = HangulParser(break_characters=settings.get_break_characters())
    log = VocabularyLog(settings.get_log_path())
    log.load()

    window = QWidget()
    window.setObjectName("ComposerWindow")
    window.setWindowTitle("Hangul RR composer")

    outer = QHBoxLayout(window)
    left = QVBoxLayout()
    left.setSpacing(10)
    outer.addLayout(left, 1)

    result = QLabel("")
    result.setObjectName("labelHangulResult")
    f = QFont()
    f.setPointSize(24)
    result.setFont(f)
    result.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
    left.addLayout(_mk_row("Hangul", result))

    line_rr = QLineEdit()
    line_rr.setObjectName("lineRrInput")
    line_rr.setPlaceholderText("romanization, e.g. han-gug")
    left.addLayout(_mk_row("RR", line_rr))

    line_desc = QLineEdit()
    line_desc.setObjectName("lineDescription")
    left.addLayout(_mk_row("Desc", line_desc))

    buttons = QHBoxLayout()
    for text, name in (("SAVE", "buttonSave"), ("FIND", "buttonFind"), ("DELETE", "buttonDelete")):
        btn = QPushButton(text)
        btn.setObjectName(name)
        buttons.addWidget(btn)
    left.addLayout(buttons)

    status = QLabel("")
    status.setObjectName("labelStatus")
    left.addWidget(status)

    left.addWidget(_mk_title_label("Combinations:"))
    combinations = QLabel("")
    combinations.setObjectName("labelCombinations")
    left.addWidget(combinations)

    info = QLabel(jamo_info_text())
    info.setObjectName("labelJamoInfo")
    mono = QFont("monospace")
    mono.setStyleHint(QFont.StyleHint.Monospace)
    info.setFont(mono)
    left.addWidget(info)
    left.addStretch(1)

    vocabulary = QListWidget()
    vocabulary.setObjectName("listVocabulary")
    outer.addWidget(vocabulary, 1)

    controller = RrInputUiController(
        window=window,
        composer=ComposerController(parser),
        log=log,
    )
    controller.wire()

    # Keep the controller alive with the window.
    window._controller = controller  # type: ignore[attr-defined]
    line_rr.setFocus()
    return window
