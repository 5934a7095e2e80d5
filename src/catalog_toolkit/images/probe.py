"""
Module: images.probe

Purpose:
    Look up the pixel size of a source photo before planning.

Key Classes:
    - DimensionProbe: Abstract interface for size lookup
    - PillowDimensionProbe: Reads the size from the image header via PIL
    - DimensionProbeError: Size could not be determined

Dependencies:
    - PIL: Header parsing
    - catalog_toolkit.core.models: Dimensions

Used By:
    - processor: process_image()
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from catalog_toolkit.core.models import Dimensions, InvalidDimensionsError

logger = logging.getLogger(__name__)

ImageSource = Union[str, PathLike]


class DimensionProbeError(Exception):
    """Source image size could not be determined."""
    pass


class DimensionProbe(ABC):
    """
    Abstract interface for reading a source image's size.

    Implementations must raise DimensionProbeError for any failure so the
    pipeline stops before planning.
    """

    @abstractmethod
    def probe(self, source: ImageSource) -> Dimensions:
        """
        Get the pixel size of `source`.

        Args:
            source: Path to the image

        Returns:
            Dimensions of the image

        Raises:
            DimensionProbeError: If the size cannot be read
        """


class PillowDimensionProbe(DimensionProbe):
    """
    Probe backed by PIL.

    Image.open only parses the header, so no pixel data is decoded.

    Example:
        >>> PillowDimensionProbe().probe("photo.jpg")
        Dimensions(4032x3024)
    """

    def probe(self, source: ImageSource) -> Dimensions:
        path = Path(source)
        try:
            with Image.open(path) as img:
                width, height = img.size
        except FileNotFoundError as e:
            raise DimensionProbeError(f"Image not found: {path}") from e
        except UnidentifiedImageError as e:
            raise DimensionProbeError(f"Unrecognised image format: {path}") from e
        except Image.DecompressionBombError as e:
            raise DimensionProbeError(f"Image too large: {path}: {e}") from e
        except OSError as e:
            raise DimensionProbeError(f"Failed to read image {path}: {e}") from e

        try:
            dimensions = Dimensions(width, height)
        except InvalidDimensionsError as e:
            raise DimensionProbeError(f"Image {path} reports invalid size: {e}") from e

        logger.debug(f"Probed {path.name}: {dimensions}")
        return dimensions
