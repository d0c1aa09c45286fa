from abc import ABC, abstractmethod
from typing import Any, Dict, List


class IGalleryApi(ABC):
    """Interface to the remote dataset server."""

    @abstractmethod
    async def list_images(self, dataset_name: str) -> List[Dict[str, Any]]:
        """
        Return the raw image entries of *dataset_name*.
        Each entry carries at least an ``img_path`` string; order is not meaningful.
        Raises NetworkError (or MalformedResponseError) on failure.
        """
        pass

    @abstractmethod
    async def delete_image(self, img_path: str) -> None:
        """
        Delete a single image by its server path.
        Returns normally on a 2xx answer, raises NetworkError otherwise.
        """
        pass
