"""Selection state for the gallery grid."""

from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from iGallery.domain.models import ImageList
from iGallery.gui.viewmodels.signal import Signal


class SelectionSet:
    """Set of selected image paths.

    The set never filters itself against a new list; the owning view model
    clears it on every list replacement, which is what keeps it a subset of
    the current paths.

    ``changed`` is emitted with the sorted tuple of selected paths whenever
    membership actually changes.
    """

    def __init__(self) -> None:
        self._paths: set[str] = set()
        self.changed = Signal()

    # -- Queries ------------------------------------------------------------

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __bool__(self) -> bool:
        return bool(self._paths)

    def is_all_selected(self, current: ImageList) -> bool:
        """True when *current* is non-empty and every one of its paths is selected."""
        return len(current) > 0 and len(self._paths) == len(current)

    # -- Mutations ----------------------------------------------------------

    def toggle(self, path: str, included: bool) -> None:
        if included:
            if path in self._paths:
                return
            self._paths.add(path)
        else:
            if path not in self._paths:
                return
            self._paths.discard(path)
        self._notify()

    def select_all(self, current: ImageList) -> None:
        """Select every path of *current*, or clear when already fully selected.

        The comparison is by size, so a fully selected list always flips to
        empty and anything else flips to the full list.
        """
        if len(self._paths) == len(current):
            self.clear()
            return
        self._replace(current.paths)

    def clear(self) -> None:
        if self._paths:
            self._paths.clear()
            self._notify()

    def _replace(self, paths: Iterable[str]) -> None:
        new_paths = set(paths)
        if new_paths != self._paths:
            self._paths = new_paths
            self._notify()

    def _notify(self) -> None:
        self.changed.emit(self.paths)
