"""Dialog presenters answering the view model's UI commands."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from PySide6.QtGui import QPalette
from PySide6.QtWidgets import QApplication, QMessageBox, QWidget

from ..services.ui_commands import ConfirmRequest, UiCommandChannel

_logger = logging.getLogger(__name__)

_ICONS = {
    "warning": QMessageBox.Icon.Warning,
    "danger": QMessageBox.Icon.Critical,
    "info": QMessageBox.Icon.Information,
}


def _apply_theme(box: QMessageBox, parent: Optional[QWidget]) -> None:
    """Apply the active theme colors to the message box."""
    palette = parent.palette() if parent else QApplication.palette()

    bg_color = palette.color(QPalette.ColorRole.Window).name()
    text_color = palette.color(QPalette.ColorRole.WindowText).name()
    box.setStyleSheet(
        f"QMessageBox {{ background-color: {bg_color}; color: {text_color}; }}"
        f"QLabel {{ color: {text_color}; }}"
    )


def show_error(parent: Optional[QWidget], message: str, *, title: str = "iGallery") -> None:
    """Display a blocking error message."""

    box = QMessageBox(QMessageBox.Icon.Critical, title, message, QMessageBox.StandardButton.Ok, parent)
    _apply_theme(box, parent)
    box.exec()


def confirm_action(
    parent: Optional[QWidget],
    message: str,
    *,
    title: str = "Confirmation",
    yes_label: str = "Yes",
    no_label: str = "Cancel",
    kind: str = "warning",
) -> bool:
    """Ask the user to confirm an action.

    Returns:
        True if the user selected the affirmative option, False otherwise.
    """
    icon = _ICONS.get(kind, QMessageBox.Icon.Question)
    box = QMessageBox(icon, title, message, QMessageBox.StandardButton.NoButton, parent)
    yes_btn = box.addButton(yes_label, QMessageBox.ButtonRole.AcceptRole)
    no_btn = box.addButton(no_label, QMessageBox.ButtonRole.RejectRole)
    box.setDefaultButton(no_btn)

    _apply_theme(box, parent)
    box.exec()

    clicked = box.clickedButton()
    return clicked == yes_btn if clicked is not None else False


class QtConfirmPresenter:
    """Shows a message box for every :class:`ConfirmRequest` on the channel.

    Approved requests are scheduled on the running (QtAsyncio) loop.
    """

    def __init__(self, commands: UiCommandChannel, parent: Optional[QWidget] = None) -> None:
        self._parent = parent
        self._tasks: set[asyncio.Task] = set()
        commands.confirm_requested.connect(self.present)

    def present(self, request: ConfirmRequest) -> None:
        approved = confirm_action(
            self._parent,
            request.message,
            title=request.title,
            yes_label=request.confirm_text,
            kind=request.type,
        )
        if not approved:
            request.reject()
            return
        task = asyncio.ensure_future(request.on_confirm())
        self._tasks.add(task)
        task.add_done_callback(self._on_done)

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            _logger.error("Confirmed action failed: %s", task.exception())
