from .bus import Event, EventBus, Subscription
from .domain_events import DomainEvent
from .gallery_events import (
    DatasetOpenedEvent,
    ImageListFailedEvent,
    ImageListLoadedEvent,
    ImagesDeletedEvent,
    ImagesUploadedEvent,
)

__all__ = [
    "DatasetOpenedEvent",
    "DomainEvent",
    "Event",
    "EventBus",
    "ImageListFailedEvent",
    "ImageListLoadedEvent",
    "ImagesDeletedEvent",
    "ImagesUploadedEvent",
    "Subscription",
]
