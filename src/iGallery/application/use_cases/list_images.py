import logging
from dataclasses import dataclass
from typing import Any, Iterable

from .base import UseCase, UseCaseRequest, UseCaseResponse
from iGallery.application.interfaces import IGalleryApi
from iGallery.domain.models import EMPTY_IMAGE_LIST, ImageEntry, ImageList
from iGallery.errors import MalformedResponseError, NetworkError
from iGallery.events.bus import EventBus
from iGallery.events.gallery_events import ImageListFailedEvent, ImageListLoadedEvent


@dataclass(frozen=True)
class ListImagesRequest(UseCaseRequest):
    dataset_name: str = ""


@dataclass(frozen=True)
class ListImagesResponse(UseCaseResponse):
    images: ImageList = EMPTY_IMAGE_LIST


def normalize_entries(raw_entries: Iterable[Any]) -> ImageList:
    """Turn raw ``{"img_path": ...}`` records into a sorted :class:`ImageList`."""
    entries = []
    for index, raw in enumerate(raw_entries):
        if not isinstance(raw, dict):
            raise MalformedResponseError(f"Image entry #{index} is not an object")
        path = raw.get("img_path")
        if not isinstance(path, str) or not path:
            raise MalformedResponseError(f"Image entry #{index} has no img_path")
        entries.append(ImageEntry(path=path))
    return ImageList.from_entries(entries)


class ListImagesUseCase(UseCase):
    """Fetch the current image list of a dataset.

    Has no side effects besides the request itself and the bus notification;
    selection handling is left to the caller.
    """

    def __init__(self, api: IGalleryApi, event_bus: EventBus):
        self._api = api
        self._event_bus = event_bus
        self._logger = logging.getLogger(__name__)

    async def fetch(self, dataset_name: str) -> ImageList:
        if not dataset_name:
            raise ValueError("dataset_name must be a non-empty string")

        self._logger.info("Fetching images for dataset %s", dataset_name)
        try:
            raw_entries = await self._api.list_images(dataset_name)
            images = normalize_entries(raw_entries)
        except NetworkError as exc:
            self._logger.error("Error fetching images for %s: %s", dataset_name, exc)
            self._event_bus.publish(ImageListFailedEvent(dataset_name=dataset_name, message=str(exc)))
            raise

        self._logger.debug("Dataset %s has %d images", dataset_name, len(images))
        self._event_bus.publish(ImageListLoadedEvent(dataset_name=dataset_name, image_count=len(images)))
        return images

    async def execute(self, request: ListImagesRequest) -> ListImagesResponse:
        try:
            images = await self.fetch(request.dataset_name)
        except (NetworkError, ValueError) as exc:
            return ListImagesResponse(success=False, error=str(exc))
        return ListImagesResponse(success=True, images=images)
