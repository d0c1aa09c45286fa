from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Iterator, Optional, Tuple


class GalleryStatus(str, Enum):
    """Consistency state of the displayed image list."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, order=True)
class ImageEntry:
    """A single image of a dataset, identified by its server-side path."""

    path: str


@dataclass(frozen=True)
class ImageList:
    """Immutable, path-sorted and path-unique sequence of images.

    Always build instances through :meth:`from_entries`; the server order is
    never trusted.
    """

    entries: Tuple[ImageEntry, ...] = ()
    _path_set: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_path_set", frozenset(entry.path for entry in self.entries))

    @classmethod
    def from_entries(cls, entries: Iterable[ImageEntry]) -> "ImageList":
        # Python compares str by code point, which is the ordinal order we want.
        unique = {entry.path: entry for entry in entries}
        return cls(tuple(unique[path] for path in sorted(unique)))

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> "ImageList":
        return cls.from_entries(ImageEntry(path) for path in paths)

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(entry.path for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ImageEntry]:
        return iter(self.entries)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, ImageEntry):
            item = item.path
        if not isinstance(item, str):
            return False
        return item in self._path_set

    def __getitem__(self, index: int) -> ImageEntry:
        return self.entries[index]


EMPTY_IMAGE_LIST = ImageList()


@dataclass(frozen=True)
class DeleteOutcome:
    path: str
    succeeded: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class BatchDeleteResult:
    """Per-item outcomes of one batch delete.

    ``succeeded`` is deliberately coarse: a single failed item marks the whole
    batch as failed.
    """

    outcomes: Tuple[DeleteOutcome, ...] = ()
    dataset_name: str = ""

    @property
    def requested(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> bool:
        return all(outcome.succeeded for outcome in self.outcomes)

    @property
    def deleted_paths(self) -> Tuple[str, ...]:
        return tuple(o.path for o in self.outcomes if o.succeeded)

    @property
    def failed_paths(self) -> Tuple[str, ...]:
        return tuple(o.path for o in self.outcomes if not o.succeeded)


@dataclass
class GallerySnapshot:
    """Read-only view of the controller state handed to renderers."""

    dataset_name: Optional[str]
    status: GalleryStatus
    images: ImageList = field(default_factory=ImageList)
    selected: Tuple[str, ...] = ()
    error_message: Optional[str] = None

    @property
    def all_selected(self) -> bool:
        return bool(self.images) and len(self.selected) == len(self.images)
