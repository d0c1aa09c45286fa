"""Minimal dataset window: list, Select All, Delete Selected, Refresh, Add Images."""

from __future__ import annotations

import asyncio
from typing import Any

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListView,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...domain.models import GalleryStatus
from ..viewmodels.gallery_viewmodel import GalleryViewModel
from .image_list_model import ImageListModel

_STATUS_TEXT = {
    GalleryStatus.IDLE: "",
    GalleryStatus.LOADING: "Loading...",
    GalleryStatus.SUCCESS: "",
}


class GalleryWindow(QWidget):
    """Renders a :class:`GalleryViewModel`; holds no gallery state of its own."""

    def __init__(self, viewmodel: GalleryViewModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._vm = viewmodel
        self._tasks: set[asyncio.Task] = set()
        self.model = ImageListModel(viewmodel, self)

        self.title_label = QLabel(self)
        self.status_label = QLabel(self)
        self.delete_button = QPushButton(self)
        self.select_all_button = QPushButton(self)
        self.refresh_button = QPushButton("Refresh", self)
        self.add_images_button = QPushButton("Add Images", self)
        self.list_view = QListView(self)
        self.list_view.setModel(self.model)

        top_bar = QHBoxLayout()
        top_bar.addWidget(self.title_label)
        top_bar.addStretch(1)
        top_bar.addWidget(self.delete_button)
        top_bar.addWidget(self.select_all_button)
        top_bar.addWidget(self.refresh_button)
        top_bar.addWidget(self.add_images_button)

        layout = QVBoxLayout(self)
        layout.addLayout(top_bar)
        layout.addWidget(self.status_label)
        layout.addWidget(self.list_view, 1)

        self.delete_button.clicked.connect(lambda: self._vm.request_delete_selected())
        self.select_all_button.clicked.connect(lambda: self._vm.select_all())
        self.refresh_button.clicked.connect(lambda: self.run(self._vm.refresh()))
        self.add_images_button.clicked.connect(lambda: self._vm.request_upload())

        viewmodel.dataset_name.changed.connect(self._sync)
        viewmodel.status.changed.connect(self._sync)
        viewmodel.selection.changed.connect(self._sync)
        self._sync()

    def run(self, coro) -> asyncio.Task:
        """Schedule *coro* on the running loop and keep a reference to it."""
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _sync(self, *_args: Any) -> None:
        name = self._vm.dataset_name.value or ""
        self.title_label.setText(f"Dataset: {name}")
        self.setWindowTitle(f"iGallery - {name}" if name else "iGallery")

        status = self._vm.status.value
        if status is GalleryStatus.ERROR:
            self.status_label.setText(self._vm.error_message.value or "")
        elif status is GalleryStatus.SUCCESS and not self._vm.visible_images:
            self.status_label.setText("No images found")
        else:
            self.status_label.setText(_STATUS_TEXT.get(status, ""))
        self.list_view.setVisible(status is GalleryStatus.SUCCESS)

        selected = len(self._vm.selection)
        self.delete_button.setText(f"Delete Selected ({selected})")
        self.delete_button.setVisible(selected > 0)
        self.select_all_button.setText("Deselect All" if self._vm.all_selected else "Select All")
        # Shown only when the host application connected an upload presenter.
        self.add_images_button.setVisible(self._vm.can_upload)
