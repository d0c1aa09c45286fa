"""Custom exception hierarchy for iGallery."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from ..domain.models import BatchDeleteResult


class GalleryError(Exception):
    """Base class for all custom errors raised by iGallery."""


# --- 3-layer hierarchy ---

class DomainError(GalleryError):
    """Base class for domain-level errors."""


class InfrastructureError(GalleryError):
    """Base class for infrastructure-level errors."""


class ApplicationError(GalleryError):
    """Base class for application-level errors."""


# --- Infrastructure errors ---

class NetworkError(InfrastructureError):
    """Raised when a request to the dataset server fails.

    Covers transport failures as well as non-2xx responses.  ``status_code``
    is ``None`` when no response was received at all.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class MalformedResponseError(NetworkError):
    """Raised when the server answers with an unexpected payload shape."""


# --- Application errors ---

class BatchDeleteError(ApplicationError):
    """Raised when at least one deletion of a batch failed."""

    def __init__(self, message: str, result: "BatchDeleteResult") -> None:
        super().__init__(message)
        self.result = result


# --- DI-specific errors ---

class CircularDependencyError(GalleryError):
    """Raised when a circular dependency is detected during resolution."""


class ResolutionError(GalleryError):
    """Raised when a dependency cannot be resolved."""


# --- Settings ---

class SettingsError(GalleryError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


__all__ = [
    "ApplicationError",
    "BatchDeleteError",
    "CircularDependencyError",
    "DomainError",
    "GalleryError",
    "InfrastructureError",
    "MalformedResponseError",
    "NetworkError",
    "ResolutionError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
]
