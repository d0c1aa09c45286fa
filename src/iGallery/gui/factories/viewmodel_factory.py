"""ViewModelFactory: centralised ViewModel creation.

Uses the DI ``Container`` to resolve dependencies so presentation code never
wires use cases by hand.
"""

from __future__ import annotations

from iGallery.application.use_cases.delete_images import DeleteImagesUseCase
from iGallery.application.use_cases.list_images import ListImagesUseCase
from iGallery.di.container import Container
from iGallery.errors.handler import ErrorHandler
from iGallery.events.bus import EventBus
from iGallery.gui.services.ui_commands import UiCommandChannel
from iGallery.gui.viewmodels.gallery_viewmodel import GalleryViewModel


class ViewModelFactory:
    """Centrally creates ViewModels."""

    def __init__(self, container: Container) -> None:
        self._container = container

    def create_gallery_vm(self, commands: UiCommandChannel | None = None) -> GalleryViewModel:
        error_handler = None
        if self._container.is_registered(ErrorHandler):
            error_handler = self._container.resolve(ErrorHandler)
        return GalleryViewModel(
            list_images=self._container.resolve(ListImagesUseCase),
            delete_images=self._container.resolve(DeleteImagesUseCase),
            event_bus=self._container.resolve(EventBus),
            commands=commands or UiCommandChannel(),
            error_handler=error_handler,
        )
