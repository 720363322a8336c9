from __future__ import annotations

import logging
from typing import Callable, Final, Optional

from PyQt6.QtCore import QEvent, QObject, Qt
from PyQt6.QtWidgets import QLabel, QLineEdit, QListWidget, QPushButton, QWidget

from hangul_rr.controllers.composer_controller import ComposerController, SubmitError
from hangul_rr.domain.errors import HangulError
from hangul_rr.services.vocabulary_log import VocabularyLog

logger = logging.getLogger(__name__)

NOT_FOUND: Final[str] = "Could not find given entry!"


class _BackspaceOnEmpty(QObject):
    """Event filter: Backspace in an empty QLineEdit calls `on_backspace`."""

    def __init__(self, line: QLineEdit, on_backspace: Callable[[], None]) -> None:
        super().__init__(line)
        self._line = line
        self._on_backspace = on_backspace

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:  # noqa: N802 (Qt API)
        if (
                obj is self._line
                and event.type() == QEvent.Type.KeyPress
                and event.key() == Qt.Key.Key_Backspace
                and not self._line.text()
        ):
            self._on_backspace()
            return True
        return False


class RrInputUiController:
    """Wires the composer widgets to a `ComposerController`.

    Widgets are located by objectName so the window layout can change freely:
    lineRrInput, labelHangulResult, labelCombinations, lineDescription,
    buttonSave, buttonFind, buttonDelete, labelStatus, listVocabulary.
    """

    def __init__(
            self,
            *,
            window: QWidget,
            composer: ComposerController,
            log: VocabularyLog,
    ) -> None:
        self._window = window
        self._composer = composer
        self._log = log

        self.line_rr: Optional[QLineEdit] = None
        self.label_result: Optional[QLabel] = None
        self.label_combinations: Optional[QLabel] = None
        self.line_description: Optional[QLineEdit] = None
        self.btn_save: Optional[QPushButton] = None
        self.btn_find: Optional[QPushButton] = None
        self.btn_delete: Optional[QPushButton] = None
        self.label_status: Optional[QLabel] = None
        self.list_vocabulary: Optional[QListWidget] = None
        self._backspace_filter: Optional[_BackspaceOnEmpty] = None

    @property
    def composer(self) -> ComposerController:
        return self._composer

    @property
    def log(self) -> VocabularyLog:
        return self._log

    def wire(self) -> None:
        self.line_rr = self._window.findChild(QLineEdit, "lineRrInput")
        self.label_result = self._window.findChild(QLabel, "labelHangulResult")
        self.label_combinations = self._window.findChild(QLabel, "labelCombinations")
        self.line_description = self._window.findChild(QLineEdit, "lineDescription")
        self.btn_save = self._window.findChild(QPushButton, "buttonSave")
        self.btn_find = self._window.findChild(QPushButton, "buttonFind")
        self.btn_delete = self._window.findChild(QPushButton, "buttonDelete")
        self.label_status = self._window.findChild(QLabel, "labelStatus")
        self.list_vocabulary = self._window.findChild(QListWidget, "listVocabulary")

        if self.line_rr is not None:
            self.line_rr.textEdited.connect(self._on_rr_edited)
            self.line_rr.returnPressed.connect(self._on_rr_enter)
            self._backspace_filter = _BackspaceOnEmpty(self.line_rr, self._on_backspace)
            self.line_rr.installEventFilter(self._backspace_filter)
        if self.line_description is not None:
            self.line_description.returnPressed.connect(self._on_save)
        if self.btn_save is not None:
            self.btn_save.clicked.connect(self._on_save)
        if self.btn_find is not None:
            self.btn_find.clicked.connect(self._on_find)
        if self.btn_delete is not None:
            self.btn_delete.clicked.connect(self._on_delete)
        if self.list_vocabulary is not None:
            self.list_vocabulary.currentRowChanged.connect(self._on_row_changed)

        self.update()
        self.refresh_vocabulary()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def update(self) -> None:
        if self.label_result is not None:
            self.label_result.setText(self._composer.display())
        if self.label_combinations is not None:
            pairs = self._composer.combinations()
            glyphs = "  ".join(g for g, _ in pairs)
            spellings = "  ".join(s for _, s in pairs)
            self.label_combinations.setText("{}\n{}".format(glyphs, spellings) if pairs else "")
        if self.line_rr is not None:
            self.line_rr.setToolTip(
                "Unused: {}".format(self._composer.overflow) if self._composer.overflow else ""
            )

    def refresh_vocabulary(self) -> None:
        if self.list_vocabulary is None:
            return
        # Rebuilding the list must not move the log cursor.
        self.list_vocabulary.blockSignals(True)
        try:
            self.list_vocabulary.clear()
            for hangul, description in self._log.entries():
                self.list_vocabulary.addItem("{}  {}".format(hangul, description))
            if len(self._log):
                self.list_vocabulary.setCurrentRow(self._log.index)
        finally:
            self.list_vocabulary.blockSignals(False)

    def _set_status(self, text: str) -> None:
        if self.label_status is not None:
            self.label_status.setText(text)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _on_rr_edited(self, text: str) -> None:
        try:
            self._composer.set_rr(text)
        except HangulError as e:
            logger.debug("Ignoring romanization %r: %s", text, e)
        self._set_status("")
        self.update()

    def _on_rr_enter(self) -> None:
        rest = self._composer.push()
        if self.line_rr is not None:
            try:
                self.line_rr.setText(rest)
            except RuntimeError:
                # wrapped C++ object already deleted
                logger.exception("Failed to reseed romanization input")
                self.line_rr = None
        self.update()

    def _on_backspace(self) -> None:
        popped = self._composer.pop()
        logger.debug("Backspace removed %r", popped)
        self.update()

    def _on_save(self) -> None:
        description = self.line_description.text() if self.line_description is not None else ""
        try:
            word = self._composer.submit(description, self._log)
        except SubmitError as e:
            self._set_status(str(e))
            return

        self._log.index_at(word)
        self._log.save()
        self._reset_inputs()
        self._set_status("Saved {}".format(word))
        self.update()
        self.refresh_vocabulary()

    def _reset_inputs(self) -> None:
        if self.line_rr is not None:
            self.line_rr.clear()
        if self.line_description is not None:
            self.line_description.clear()

    def _on_find(self) -> None:
        try:
            word, found = self._composer.find(self._log)
        except SubmitError as e:
            self._set_status(str(e))
            return

        if self.line_rr is not None:
            self.line_rr.clear()
        self._set_status("Found {}".format(word) if found else NOT_FOUND)
        self.update()
        self.refresh_vocabulary()

    def _on_delete(self) -> None:
        try:
            word, removed = self._composer.delete(self._log)
        except SubmitError as e:
            self._set_status(str(e))
            return

        self._reset_inputs()
        if removed is None:
            self._set_status(NOT_FOUND)
        else:
            self._log.save()
            self._set_status("Deleted {}".format(word))
        self.update()
        self.refresh_vocabulary()

    def _on_row_changed(self, row: int) -> None:
        # -1 while the list is empty
        if row >= 0:
            self._log.select(row)
