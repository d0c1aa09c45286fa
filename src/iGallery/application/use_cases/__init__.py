from .base import UseCase, UseCaseRequest, UseCaseResponse
from .delete_images import DeleteImagesUseCase
from .list_images import ListImagesUseCase

__all__ = [
    "DeleteImagesUseCase",
    "ListImagesUseCase",
    "UseCase",
    "UseCaseRequest",
    "UseCaseResponse",
]
