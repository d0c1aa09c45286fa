"""GUI entry point for the iGallery desktop viewer."""

from __future__ import annotations

import sys
from typing import Callable, Optional

from PySide6 import QtAsyncio
from PySide6.QtWidgets import QApplication

from iGallery.di.bootstrap import create_container
from iGallery.gui.factories.viewmodel_factory import ViewModelFactory
from iGallery.gui.qt.dialogs import QtConfirmPresenter, show_error
from iGallery.gui.qt.gallery_window import GalleryWindow
from iGallery.gui.services.ui_commands import UiCommandChannel, UploadRequest
from iGallery.errors.handler import ErrorHandler
from iGallery.settings.manager import SettingsManager


def main(
    dataset_name: Optional[str] = None,
    api_url: Optional[str] = None,
    argv: list[str] | None = None,
    upload_presenter: Optional[Callable[[UploadRequest], None]] = None,
) -> int:
    """Launch the Qt application on the QtAsyncio loop and return the exit code.

    *upload_presenter* is the host application's upload dialog.  It receives
    every :class:`UploadRequest` and must await ``request.on_uploaded()`` once
    the upload succeeded; without it the "Add Images" button stays hidden.
    """

    arguments = list(sys.argv if argv is None else argv)
    if dataset_name is None and len(arguments) > 1:
        dataset_name = arguments[1]

    app = QApplication.instance() or QApplication(arguments)

    settings = SettingsManager()
    settings.load()
    container = create_container(settings, api_url=api_url)

    commands = UiCommandChannel()
    viewmodel = ViewModelFactory(container).create_gallery_vm(commands)
    window = GalleryWindow(viewmodel)
    if upload_presenter is not None:
        commands.upload_requested.connect(upload_presenter)
    QtConfirmPresenter(commands, window)
    container.resolve(ErrorHandler).register_ui_callback(
        lambda message, _severity: window.status_label.setText(message)
    )
    window.resize(720, 540)
    window.show()

    if dataset_name:
        settings.remember_dataset(dataset_name)
    else:
        recent = settings.get("last_datasets", [])
        dataset_name = recent[0] if recent else None
    if not dataset_name:
        show_error(window, "No dataset selected.")
        return 1

    QtAsyncio.run(viewmodel.mount(dataset_name), keep_running=True, quit_qapp=True)
    viewmodel.dispose()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual launch
    raise SystemExit(main())
