from .models import (
    EMPTY_IMAGE_LIST,
    BatchDeleteResult,
    DeleteOutcome,
    GallerySnapshot,
    GalleryStatus,
    ImageEntry,
    ImageList,
)

__all__ = [
    "BatchDeleteResult",
    "DeleteOutcome",
    "EMPTY_IMAGE_LIST",
    "GallerySnapshot",
    "GalleryStatus",
    "ImageEntry",
    "ImageList",
]
