"""GalleryViewModel (MVVM): pure Python, no Qt dependency.

Owns the image list of one mounted dataset, the selection over it and the
``idle → loading → success/error`` status renderers bind to.  All state is
mutated on the event-loop thread between ``await`` points.
"""

from __future__ import annotations

import functools
import logging
from typing import AbstractSet, Optional

from iGallery.application.use_cases.delete_images import DeleteImagesUseCase
from iGallery.application.use_cases.list_images import ListImagesUseCase
from iGallery.config import (
    DELETE_CONFIRM_MESSAGE,
    DELETE_CONFIRM_TEXT,
    DELETE_CONFIRM_TITLE,
    DELETE_CONFIRM_TYPE,
    FETCH_ERROR_MESSAGE,
)
from iGallery.domain.models import (
    EMPTY_IMAGE_LIST,
    BatchDeleteResult,
    GallerySnapshot,
    GalleryStatus,
    ImageList,
)
from iGallery.errors import NetworkError
from iGallery.errors.handler import ErrorHandler, ErrorSeverity
from iGallery.events.bus import EventBus
from iGallery.events.gallery_events import DatasetOpenedEvent, ImagesUploadedEvent
from iGallery.gui.services.ui_commands import ConfirmRequest, UiCommandChannel, UploadRequest
from iGallery.gui.viewmodels.base import BaseViewModel
from iGallery.gui.viewmodels.selection import SelectionSet
from iGallery.gui.viewmodels.signal import ObservableProperty, Signal


class GalleryViewModel(BaseViewModel):
    """Gallery controller for a single dataset view.

    Every fetch is tagged with a generation number.  A response that arrives
    after a newer fetch was started, or after the dataset was switched, is
    dropped instead of being applied.
    """

    def __init__(
        self,
        list_images: ListImagesUseCase,
        delete_images: DeleteImagesUseCase,
        event_bus: EventBus,
        commands: UiCommandChannel,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        super().__init__()
        self._list_images = list_images
        self._delete_images = delete_images
        self._event_bus = event_bus
        self._commands = commands
        self._error_handler = error_handler
        self._logger = logging.getLogger(__name__)
        self._generation = 0

        # Observable properties
        self.dataset_name = self.own(ObservableProperty(None))
        self.status = self.own(ObservableProperty(GalleryStatus.IDLE))
        self.images = self.own(ObservableProperty(EMPTY_IMAGE_LIST))
        self.error_message = self.own(ObservableProperty(None))
        self.selection = SelectionSet()
        self.own(self.selection.changed)

        # Signals
        self.images_updated = self.own(Signal())  # emits (ImageList) after every successful fetch
        self.batch_deleted = self.own(Signal())  # emits (BatchDeleteResult)

        self.subscribe_event(event_bus, ImagesUploadedEvent, self._on_images_uploaded, async_=True)

    # -- Queries ------------------------------------------------------------

    @property
    def visible_images(self) -> ImageList:
        """The list renderers may show; empty unless the last fetch succeeded."""
        if self.status.value is GalleryStatus.SUCCESS:
            return self.images.value
        return EMPTY_IMAGE_LIST

    def snapshot(self) -> GallerySnapshot:
        return GallerySnapshot(
            dataset_name=self.dataset_name.value,
            status=self.status.value,
            images=self.visible_images,
            selected=self.selection.paths,
            error_message=self.error_message.value,
        )

    # -- Loading ------------------------------------------------------------

    async def mount(self, dataset_name: Optional[str]) -> None:
        """Bind the view model to *dataset_name* and load its images.

        Switching to another dataset throws away all state of the previous
        one.  Mounting the current dataset again just refreshes it.
        """
        if dataset_name != self.dataset_name.value:
            self._reset()
            self.dataset_name.value = dataset_name
            if dataset_name:
                self._event_bus.publish(DatasetOpenedEvent(dataset_name=dataset_name))
        await self.refresh()

    async def refresh(self) -> None:
        """Re-fetch the mounted dataset; a no-op while no dataset is mounted."""
        dataset_name = self.dataset_name.value
        if not dataset_name:
            return

        self._generation += 1
        generation = self._generation
        self.status.value = GalleryStatus.LOADING
        try:
            images = await self._list_images.fetch(dataset_name)
        except NetworkError as exc:
            if self._is_stale(generation, dataset_name):
                self._logger.debug("Discarding stale fetch failure for %s", dataset_name)
                return
            self.error_message.value = FETCH_ERROR_MESSAGE
            self.status.value = GalleryStatus.ERROR
            if self._error_handler is not None:
                self._error_handler.handle(
                    exc,
                    ErrorSeverity.ERROR,
                    context={"dataset": dataset_name},
                    message=FETCH_ERROR_MESSAGE,
                )
            return

        if self._is_stale(generation, dataset_name):
            self._logger.debug("Discarding stale image list for %s", dataset_name)
            return
        self.images.value = images
        self.selection.clear()
        self.error_message.value = None
        self.status.value = GalleryStatus.SUCCESS
        self.images_updated.emit(images)

    async def refresh_dataset(self, dataset_name: str) -> None:
        """Refresh only if *dataset_name* is still the mounted dataset."""
        if dataset_name != self.dataset_name.value:
            self._logger.debug("Ignoring refresh for %s; %s is mounted", dataset_name, self.dataset_name.value)
            return
        await self.refresh()

    # -- Selection ----------------------------------------------------------

    def toggle(self, path: str, included: bool) -> None:
        if included and path not in self.visible_images:
            self._logger.debug("Ignoring selection of unknown path %s", path)
            return
        self.selection.toggle(path, included)

    def select_all(self) -> None:
        self.selection.select_all(self.visible_images)

    @property
    def all_selected(self) -> bool:
        return self.selection.is_all_selected(self.visible_images)

    # -- Commands -----------------------------------------------------------

    def request_delete_selected(self) -> Optional[ConfirmRequest]:
        """Ask for confirmation to delete the current selection.

        Returns the emitted request, or ``None`` when nothing is selected (in
        which case no prompt is shown at all).
        """
        paths = frozenset(self.selection)
        dataset_name = self.dataset_name.value
        if not paths or not dataset_name:
            return None

        request = ConfirmRequest(
            title=DELETE_CONFIRM_TITLE,
            message=DELETE_CONFIRM_MESSAGE.format(count=len(paths)),
            type=DELETE_CONFIRM_TYPE,
            confirm_text=DELETE_CONFIRM_TEXT,
            on_confirm=functools.partial(self.delete_paths, paths, dataset_name),
        )
        self._commands.request_confirmation(request)
        return request

    async def delete_paths(self, paths: AbstractSet[str], dataset_name: str) -> BatchDeleteResult:
        """Delete *paths* from *dataset_name*, then clear the selection and reload.

        The reload happens whatever the outcome of the batch, so the list
        always ends up matching the server.  Both the reload and the selection
        reset are skipped once another dataset has been mounted.
        """
        result = BatchDeleteResult(dataset_name=dataset_name)
        try:
            result = await self._delete_images.delete_selected(paths, dataset_name)
        finally:
            # Another dataset may have been mounted meanwhile.
            if dataset_name == self.dataset_name.value:
                self.selection.clear()
            await self.refresh_dataset(dataset_name)
        self.batch_deleted.emit(result)
        return result

    @property
    def can_upload(self) -> bool:
        """True when a dataset is mounted and some presenter handles upload requests."""
        return bool(self.dataset_name.value) and self._commands.upload_requested.handler_count > 0

    def request_upload(self) -> Optional[UploadRequest]:
        dataset_name = self.dataset_name.value
        if not dataset_name:
            return None
        request = UploadRequest(
            dataset_name=dataset_name,
            on_uploaded=functools.partial(self.refresh_dataset, dataset_name),
        )
        self._commands.request_upload(request)
        return request

    # -- Internals ----------------------------------------------------------

    def _reset(self) -> None:
        self._generation += 1
        self.selection.clear()
        self.images.value = EMPTY_IMAGE_LIST
        self.error_message.value = None
        self.status.value = GalleryStatus.IDLE

    def _is_stale(self, generation: int, dataset_name: str) -> bool:
        return (
            self.disposed
            or generation != self._generation
            or dataset_name != self.dataset_name.value
        )

    async def _on_images_uploaded(self, event: ImagesUploadedEvent) -> None:
        await self.refresh_dataset(event.dataset_name)
