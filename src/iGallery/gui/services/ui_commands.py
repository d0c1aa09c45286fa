"""UiCommandChannel: intents the view model sends to the presentation layer.

View models never open dialogs themselves.  They describe what they need
(a confirmation, an upload dialog) together with a completion callback, and
whatever presentation is connected decides how to show it.  Dialog state
lives entirely on the presentation side.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from iGallery.gui.viewmodels.signal import Signal

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfirmRequest:
    """Ask the user to approve an irreversible action.

    The presenter awaits ``on_confirm()`` only after explicit approval and
    calls :meth:`reject` otherwise.
    """

    title: str
    message: str
    type: str
    confirm_text: str
    on_confirm: Callable[[], Awaitable[Any]]
    on_cancel: Optional[Callable[[], None]] = None

    def reject(self) -> None:
        if self.on_cancel is not None:
            self.on_cancel()


@dataclass(frozen=True)
class UploadRequest:
    """Open the upload dialog for ``dataset_name``.

    ``on_uploaded`` must be awaited by the presenter after a successful upload.
    """

    dataset_name: str
    on_uploaded: Callable[[], Awaitable[Any]]


class UiCommandChannel:
    """Fan-out point for :class:`ConfirmRequest` and :class:`UploadRequest`."""

    def __init__(self) -> None:
        self.confirm_requested = Signal()
        self.upload_requested = Signal()

    def request_confirmation(self, request: ConfirmRequest) -> None:
        if self.confirm_requested.handler_count == 0:
            _logger.warning("No presenter connected; dropping confirmation %r", request.title)
            return
        self.confirm_requested.emit(request)

    def request_upload(self, request: UploadRequest) -> None:
        if self.upload_requested.handler_count == 0:
            _logger.warning("No presenter connected; dropping upload request for %s", request.dataset_name)
            return
        self.upload_requested.emit(request)
