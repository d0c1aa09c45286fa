from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..application.interfaces import IGalleryApi
from ..config import DELETE_IMAGE_ENDPOINT, LIST_IMAGES_ENDPOINT
from ..errors import MalformedResponseError
from .http_transport import RequestsTransport


class HttpGalleryApi(IGalleryApi):
    """:class:`IGalleryApi` backed by the dataset server's JSON endpoints."""

    def __init__(self, transport: RequestsTransport):
        self._transport = transport
        self._logger = logging.getLogger(__name__)

    async def list_images(self, dataset_name: str) -> List[Dict[str, Any]]:
        body = await self._transport.post_json(LIST_IMAGES_ENDPOINT, {"datasetName": dataset_name})
        if not isinstance(body, dict):
            raise MalformedResponseError(
                "listImages response is not a JSON object", endpoint=LIST_IMAGES_ENDPOINT
            )
        images = body.get("images")
        if not isinstance(images, list):
            raise MalformedResponseError(
                "listImages response has no 'images' list", endpoint=LIST_IMAGES_ENDPOINT
            )
        return images

    async def delete_image(self, img_path: str) -> None:
        self._logger.debug("Deleting %s", img_path)
        await self._transport.post_json(DELETE_IMAGE_ENDPOINT, {"imgPath": img_path})
