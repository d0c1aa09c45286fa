import asyncio
import logging
from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Optional

from .base import UseCase, UseCaseRequest, UseCaseResponse
from iGallery.application.interfaces import IGalleryApi
from iGallery.domain.models import BatchDeleteResult, DeleteOutcome
from iGallery.events.bus import EventBus
from iGallery.events.gallery_events import ImagesDeletedEvent


@dataclass(frozen=True)
class DeleteImagesRequest(UseCaseRequest):
    dataset_name: str = ""
    paths: FrozenSet[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class DeleteImagesResponse(UseCaseResponse):
    result: Optional[BatchDeleteResult] = None


class DeleteImagesUseCase(UseCase):
    """Delete a batch of images with one concurrent request per path.

    All requests are awaited before returning, even when some of them fail
    early. Failures of individual requests are recorded in the result and
    never raised; the batch as a whole is reported failed if any item failed.
    Reconciling the displayed list is up to the caller.
    """

    def __init__(self, api: IGalleryApi, event_bus: EventBus):
        self._api = api
        self._event_bus = event_bus
        self._logger = logging.getLogger(__name__)

    async def delete_selected(self, paths: AbstractSet[str], dataset_name: str) -> BatchDeleteResult:
        if not paths:
            return BatchDeleteResult(dataset_name=dataset_name)

        ordered = sorted(paths)
        settled = await asyncio.gather(
            *(self._api.delete_image(path) for path in ordered),
            return_exceptions=True,
        )

        outcomes = []
        for path, outcome in zip(ordered, settled):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    # Cancellation and interpreter exits are not item failures.
                    raise outcome
                self._logger.debug("Delete of %s failed: %s", path, outcome)
                outcomes.append(DeleteOutcome(path=path, succeeded=False, error=str(outcome) or type(outcome).__name__))
            else:
                outcomes.append(DeleteOutcome(path=path, succeeded=True))

        result = BatchDeleteResult(outcomes=tuple(outcomes), dataset_name=dataset_name)
        if result.succeeded:
            self._logger.info("Deleted %d images from %s", result.requested, dataset_name)
        else:
            self._logger.error(
                "Error deleting images from %s: %d of %d requests failed",
                dataset_name,
                len(result.failed_paths),
                result.requested,
            )

        self._event_bus.publish(ImagesDeletedEvent(
            dataset_name=dataset_name,
            deleted_paths=result.deleted_paths,
            failed_paths=result.failed_paths,
        ))
        return result

    async def execute(self, request: DeleteImagesRequest) -> DeleteImagesResponse:
        result = await self.delete_selected(request.paths, request.dataset_name)
        if result.succeeded:
            return DeleteImagesResponse(success=True, result=result)
        return DeleteImagesResponse(
            success=False,
            error=f"{len(result.failed_paths)} of {result.requested} deletions failed",
            result=result,
        )
