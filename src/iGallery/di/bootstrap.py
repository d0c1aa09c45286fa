import logging
from typing import Optional

from .container import Container
from .lifetime import Lifetime
from ..application.interfaces import IGalleryApi
from ..application.use_cases.delete_images import DeleteImagesUseCase
from ..application.use_cases.list_images import ListImagesUseCase
from ..errors.handler import ErrorHandler
from ..events.bus import EventBus
from ..infrastructure.gallery_api import HttpGalleryApi
from ..infrastructure.http_transport import RequestsTransport
from ..settings.manager import SettingsManager


def bootstrap(container: Container, settings: SettingsManager, api_url: Optional[str] = None) -> None:
    """Register all application services in the DI container.

    *api_url* overrides whatever base URL the settings resolve to.
    """
    container.register_instance(SettingsManager, settings)
    container.register_singleton(EventBus, EventBus)
    container.register_factory(
        ErrorHandler,
        lambda c: ErrorHandler(logging.getLogger("iGallery"), c.resolve(EventBus)),
        Lifetime.SINGLETON,
    )
    container.register_factory(
        RequestsTransport,
        lambda c: RequestsTransport(
            api_url or settings.api_base_url(),
            timeout=settings.request_timeout(),
        ),
        Lifetime.SINGLETON,
    )
    container.register_factory(
        IGalleryApi,
        lambda c: HttpGalleryApi(c.resolve(RequestsTransport)),
        Lifetime.SINGLETON,
    )
    container.register_factory(
        ListImagesUseCase,
        lambda c: ListImagesUseCase(c.resolve(IGalleryApi), c.resolve(EventBus)),
    )
    container.register_factory(
        DeleteImagesUseCase,
        lambda c: DeleteImagesUseCase(c.resolve(IGalleryApi), c.resolve(EventBus)),
    )


def create_container(settings: SettingsManager, api_url: Optional[str] = None) -> Container:
    container = Container()
    bootstrap(container, settings, api_url=api_url)
    return container
