"""Services bridging the gallery view model with the presentation layer."""

from .ui_commands import ConfirmRequest, UiCommandChannel, UploadRequest

__all__ = [
    "ConfirmRequest",
    "UiCommandChannel",
    "UploadRequest",
]
