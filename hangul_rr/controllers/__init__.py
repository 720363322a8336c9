"""
Controller package exports.

`ComposerController` is Qt-free; `RrInputUiController` imports PyQt6 and is
therefore not re-exported here, so domain-only users never pull in Qt.
"""

from .composer_controller import ComposerController, SubmitError  # noqa: F401

__all__ = [
    "ComposerController",
    "SubmitError",
]
