"""Storage path conventions for uploaded photos."""

from .paths import (
    MAX_CUSTOM_PHOTOS,
    PhotoLimitError,
    check_photo_slots,
    generate_item_storage_path,
    generate_storage_path,
    make_photo_filename,
    normalize_storage_path,
    resolve_photo_path,
)

__all__ = [
    "MAX_CUSTOM_PHOTOS",
    "PhotoLimitError",
    "check_photo_slots",
    "generate_item_storage_path",
    "generate_storage_path",
    "make_photo_filename",
    "normalize_storage_path",
    "resolve_photo_path",
]
