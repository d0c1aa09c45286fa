"""Default configuration values for iGallery."""

from __future__ import annotations

from typing import Final

# Base URL of the dataset server.  The settings file and the
# ``IGALLERY_API_URL`` environment variable both take precedence over it.
DEFAULT_API_URL: Final[str] = "http://localhost:8675"
API_URL_ENV_VAR: Final[str] = "IGALLERY_API_URL"

# Requests are issued from worker threads; this bounds how long a single call
# may keep one of them busy.
REQUEST_TIMEOUT_SEC: Final[float] = 30.0

LIST_IMAGES_ENDPOINT: Final[str] = "/api/datasets/listImages"
DELETE_IMAGE_ENDPOINT: Final[str] = "/api/img/delete"

# ---------------------------------------------------------------------------
# Confirmation dialog copy
# ---------------------------------------------------------------------------

DELETE_CONFIRM_TITLE: Final[str] = "Delete Selected Images"
DELETE_CONFIRM_TEXT: Final[str] = "Delete"
DELETE_CONFIRM_TYPE: Final[str] = "warning"
DELETE_CONFIRM_MESSAGE: Final[str] = (
    "Are you sure you want to delete {count} selected images? "
    "This action cannot be undone."
)

FETCH_ERROR_MESSAGE: Final[str] = "Error fetching images"

# Number of dataset names remembered in the settings file.
RECENT_DATASETS_LIMIT: Final[int] = 10
