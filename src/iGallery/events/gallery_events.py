from dataclasses import dataclass, field

from .domain_events import DomainEvent


@dataclass(frozen=True)
class DatasetOpenedEvent(DomainEvent):
    dataset_name: str = ""


@dataclass(frozen=True)
class ImageListLoadedEvent(DomainEvent):
    dataset_name: str = ""
    image_count: int = 0


@dataclass(frozen=True)
class ImageListFailedEvent(DomainEvent):
    dataset_name: str = ""
    message: str = ""


@dataclass(frozen=True)
class ImagesDeletedEvent(DomainEvent):
    dataset_name: str = ""
    deleted_paths: tuple[str, ...] = ()
    failed_paths: tuple[str, ...] = ()


@dataclass(frozen=True)
class ImagesUploadedEvent(DomainEvent):
    dataset_name: str = ""
    image_paths: list[str] = field(default_factory=list)
