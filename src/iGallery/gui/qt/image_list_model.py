"""Qt list model exposing a :class:`GalleryViewModel` to item views and QML."""

from __future__ import annotations

from enum import IntEnum
from pathlib import PurePosixPath
from typing import Any

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt

from ..viewmodels.gallery_viewmodel import GalleryViewModel


class ImageListRoles(IntEnum):
    """Custom roles for the image list model."""

    PathRole = Qt.ItemDataRole.UserRole + 1
    SelectedRole = Qt.ItemDataRole.UserRole + 2


class ImageListModel(QAbstractListModel):
    """Read-mostly mirror of ``GalleryViewModel.visible_images``.

    Rows are rebuilt whenever the list or the status changes; selection
    changes only refresh the selection roles.  Checking an item writes back
    through :meth:`GalleryViewModel.toggle`.
    """

    def __init__(self, viewmodel: GalleryViewModel, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._vm = viewmodel
        self._paths: tuple[str, ...] = viewmodel.visible_images.paths
        viewmodel.images.changed.connect(self._on_list_changed)
        viewmodel.status.changed.connect(self._on_list_changed)
        viewmodel.selection.changed.connect(self._on_selection_changed)

    def roleNames(self) -> dict[int, bytes]:  # noqa: N802  # Qt override
        return {
            Qt.ItemDataRole.DisplayRole: b"display",
            ImageListRoles.PathRole: b"path",
            ImageListRoles.SelectedRole: b"selected",
        }

    def rowCount(self, parent: QModelIndex | None = None) -> int:  # noqa: N802  # Qt override
        if parent is not None and parent.isValid():
            return 0
        return len(self._paths)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        row = index.row()
        if not index.isValid() or row < 0 or row >= len(self._paths):
            return None
        path = self._paths[row]
        if role == Qt.ItemDataRole.DisplayRole:
            return PurePosixPath(path).name or path
        if role in (ImageListRoles.PathRole, Qt.ItemDataRole.ToolTipRole):
            return path
        if role == ImageListRoles.SelectedRole:
            return path in self._vm.selection
        if role == Qt.ItemDataRole.CheckStateRole:
            return Qt.CheckState.Checked if path in self._vm.selection else Qt.CheckState.Unchecked
        return None

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return (
            Qt.ItemFlag.ItemIsEnabled
            | Qt.ItemFlag.ItemIsSelectable
            | Qt.ItemFlag.ItemIsUserCheckable
        )

    def setData(self, index: QModelIndex, value: Any, role: int = Qt.ItemDataRole.EditRole) -> bool:  # noqa: N802
        row = index.row()
        if not index.isValid() or row < 0 or row >= len(self._paths):
            return False
        if role == Qt.ItemDataRole.CheckStateRole:
            included = Qt.CheckState(value) == Qt.CheckState.Checked
        elif role == ImageListRoles.SelectedRole:
            included = bool(value)
        else:
            return False
        self._vm.toggle(self._paths[row], included)
        return True

    def path_at(self, row: int) -> str | None:
        if 0 <= row < len(self._paths):
            return self._paths[row]
        return None

    # -- View model callbacks ----------------------------------------------

    def _on_list_changed(self, *_args: Any) -> None:
        paths = self._vm.visible_images.paths
        if paths == self._paths:
            return
        self.beginResetModel()
        self._paths = paths
        self.endResetModel()

    def _on_selection_changed(self, *_args: Any) -> None:
        if not self._paths:
            return
        self.dataChanged.emit(
            self.index(0, 0),
            self.index(len(self._paths) - 1, 0),
            [ImageListRoles.SelectedRole, Qt.ItemDataRole.CheckStateRole],
        )
