"""
Module: dimensions

Purpose:
    Provides the Dimensions and CropRect dataclasses - pixel extents of an
    image or target box, and a rectangle within a source image.

Key Classes:
    - Dimensions: {width, height} in whole pixels
    - CropRect: {origin_x, origin_y, width, height} within a source image
    - InvalidDimensionsError: Raised for non-positive or non-finite extents

Dependencies:
    - dataclasses (std)
    - math, numbers (std)

Used By:
    - core.models.plans
    - planning.planner
    - images.probe
    - config
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Tuple, Union

DimensionsLike = Union["Dimensions", Tuple[Any, Any]]


class InvalidDimensionsError(ValueError):
    """Pixel extent is non-positive, non-finite or not a whole number."""
    pass


def _as_pixels(name: str, value: Any, *, allow_zero: bool = False) -> int:
    """
    Validate a pixel value and return it as an int.

    Integral floats such as 400.0 are accepted. Booleans, fractional and
    non-finite values are rejected.

    Raises:
        InvalidDimensionsError: If the value is not a usable pixel count
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDimensionsError(f"{name} must be a number: {value!r}")
    if not math.isfinite(value):
        raise InvalidDimensionsError(f"{name} must be finite: {value!r}")
    if value != int(value):
        raise InvalidDimensionsError(f"{name} must be a whole number of pixels: {value!r}")
    pixels = int(value)
    if allow_zero:
        if pixels < 0:
            raise InvalidDimensionsError(f"{name} must be >= 0: {value!r}")
    elif pixels <= 0:
        raise InvalidDimensionsError(f"{name} must be positive: {value!r}")
    return pixels


@dataclass(frozen=True, slots=True)
class Dimensions:
    """
    Pixel extents of a source image or a target box.

    Attributes:
        width: Width in pixels (> 0)
        height: Height in pixels (> 0)

    Invariants:
        - width > 0 and height > 0
        - both are whole, finite numbers (stored as int)

    Example:
        >>> Dimensions(1600, 900).ratio
        1.7777777777777777
        >>> Dimensions(0, 900)
        Traceback (most recent call last):
        ...
        InvalidDimensionsError: width must be positive: 0
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate and normalise extents on construction."""
        object.__setattr__(self, "width", _as_pixels("width", self.width))
        object.__setattr__(self, "height", _as_pixels("height", self.height))

    @property
    def ratio(self) -> float:
        """Aspect ratio (width / height)."""
        return self.width / self.height

    def as_tuple(self) -> tuple[int, int]:
        """Get as (width, height) tuple, the order Pillow uses for sizes."""
        return (self.width, self.height)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON storage."""
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> Dimensions:
        """
        Deserialize from dictionary.

        Raises:
            InvalidDimensionsError: If a key is missing or a value is invalid
        """
        try:
            return cls(width=data["width"], height=data["height"])
        except KeyError as e:
            raise InvalidDimensionsError(f"missing dimension field: {e.args[0]}") from e

    @classmethod
    def coerce(cls, value: DimensionsLike) -> Dimensions:
        """
        Accept a Dimensions instance or a (width, height) pair.

        Raises:
            InvalidDimensionsError: If value is neither
        """
        if isinstance(value, Dimensions):
            return value
        try:
            width, height = value
        except (TypeError, ValueError) as e:
            raise InvalidDimensionsError(
                f"expected Dimensions or (width, height): {value!r}"
            ) from e
        return cls(width, height)

    def __repr__(self) -> str:
        return f"Dimensions({self.width}x{self.height})"


@dataclass(frozen=True, slots=True)
class CropRect:
    """
    Rectangle within a source image, in pixels.

    The region covers [origin_x, origin_x + width) x [origin_y, origin_y + height).

    Attributes:
        origin_x: Left edge (>= 0)
        origin_y: Top edge (>= 0)
        width: Rectangle width (> 0)
        height: Rectangle height (> 0)

    Example:
        >>> rect = CropRect(origin_x=350, origin_y=0, width=900, height=900)
        >>> rect.as_box()
        (350, 0, 1250, 900)
    """

    origin_x: int
    origin_y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate rectangle on construction."""
        object.__setattr__(self, "origin_x", _as_pixels("origin_x", self.origin_x, allow_zero=True))
        object.__setattr__(self, "origin_y", _as_pixels("origin_y", self.origin_y, allow_zero=True))
        object.__setattr__(self, "width", _as_pixels("width", self.width))
        object.__setattr__(self, "height", _as_pixels("height", self.height))

    @property
    def right(self) -> int:
        """X-coordinate of the right edge (exclusive)."""
        return self.origin_x + self.width

    @property
    def bottom(self) -> int:
        """Y-coordinate of the bottom edge (exclusive)."""
        return self.origin_y + self.height

    @property
    def size(self) -> Dimensions:
        """Extent of the rectangle."""
        return Dimensions(self.width, self.height)

    def fits_within(self, dimensions: Dimensions) -> bool:
        """True if the rectangle lies entirely inside an image of this size."""
        return self.right <= dimensions.width and self.bottom <= dimensions.height

    def as_box(self) -> tuple[int, int, int, int]:
        """Get as (left, upper, right, lower) box for PIL crop."""
        return (self.origin_x, self.origin_y, self.right, self.bottom)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON storage."""
        return {
            "origin_x": self.origin_x,
            "origin_y": self.origin_y,
            "width": self.width,
            "height": self.height,
        }
