"""
Module: storage.paths

Purpose:
    Remote storage layout for processed photos. Builds the object paths
    photos are uploaded under and the filenames they are given.

Key Functions:
    - generate_storage_path(): users/{uid}/collections/{type}/{filename}
    - generate_item_storage_path(): users/{uid}/cars/{item_id}/{filename}
    - normalize_storage_path(): Strip leading/trailing slashes
    - resolve_photo_path(): Map a stored path onto the collections layout
    - make_photo_filename(): car_<epoch ms>.jpg
    - check_photo_slots(): Enforce the per-item custom photo limit

Used By:
    - Upload flow after processor.process_image()
"""

from __future__ import annotations

import time
from typing import Optional

# Custom photos a single catalog item may carry
MAX_CUSTOM_PHOTOS = 2

DEFAULT_COLLECTION = "cars"
DEFAULT_PHOTO_PREFIX = "car"


class PhotoLimitError(Exception):
    """Item already holds the maximum number of custom photos."""
    pass


def _segment(name: str, value: str) -> str:
    """Validate one path segment."""
    value = str(value).strip("/")
    if not value:
        raise ValueError(f"{name} must not be empty")
    return value


def generate_storage_path(user_id: str, collection_type: str, filename: str) -> str:
    """
    Build the storage path for a photo in a user's collection.

    Example:
        >>> generate_storage_path("u1", "cars", "car_1.jpg")
        'users/u1/collections/cars/car_1.jpg'
    """
    return (
        f"users/{_segment('user_id', user_id)}"
        f"/collections/{_segment('collection_type', collection_type)}"
        f"/{_segment('filename', filename)}"
    )


def generate_item_storage_path(user_id: str, item_id: str, filename: str) -> str:
    """
    Build the per-item storage path used by older uploads.

    Example:
        >>> generate_item_storage_path("u1", "abc", "car_1.jpg")
        'users/u1/cars/abc/car_1.jpg'
    """
    return (
        f"users/{_segment('user_id', user_id)}"
        f"/cars/{_segment('item_id', item_id)}"
        f"/{_segment('filename', filename)}"
    )


def normalize_storage_path(path: str) -> str:
    """Remove leading and trailing slashes."""
    return path.strip("/")


def resolve_photo_path(
    path: str,
    user_id: str,
    collection_type: str = DEFAULT_COLLECTION,
) -> str:
    """
    Map a stored photo path onto the collections layout.

    Paths already under collections/ are only normalised. Anything else
    (legacy or bare filenames) is rebuilt from its last segment.

    Raises:
        ValueError: If the path has no filename segment
    """
    normalized = normalize_storage_path(path)
    if "collections/" in normalized:
        return normalized
    filename = normalized.rsplit("/", 1)[-1]
    return generate_storage_path(user_id, collection_type, filename)


def make_photo_filename(
    prefix: str = DEFAULT_PHOTO_PREFIX,
    timestamp_ms: Optional[int] = None,
    extension: str = "jpg",
) -> str:
    """
    Name an uploaded photo after the current time in milliseconds.

    Example:
        >>> make_photo_filename(timestamp_ms=1700000000000)
        'car_1700000000000.jpg'
    """
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    return f"{_segment('prefix', prefix)}_{timestamp_ms}.{extension.lstrip('.')}"


def check_photo_slots(current_count: int, limit: int = MAX_CUSTOM_PHOTOS) -> None:
    """
    Raise if another custom photo would exceed the per-item limit.

    Raises:
        PhotoLimitError: If current_count >= limit
    """
    if current_count >= limit:
        raise PhotoLimitError(f"You can only add up to {limit} custom photos per item.")
