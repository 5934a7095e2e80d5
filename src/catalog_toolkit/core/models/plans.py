"""
Module: core.models.plans

Purpose:
    Transformation plans produced by the geometry planner and the ordered
    operations an image executor applies to carry them out.

Key Classes:
    - CropOperation: Cut a rectangle out of the current image
    - ResizeOperation: Scale the current image to an exact size
    - CropPlan: Centered crop then stretch to the target box
    - ResizePlan: Aspect-preserving fit within the target box
    - TransformPlan: CropPlan | ResizePlan

Dependencies:
    - core.models.dimensions: Dimensions, CropRect
    - core.models.mode: Mode

Used By:
    - planning.planner
    - images.executor
    - processor
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .dimensions import CropRect, Dimensions
from .mode import Mode


@dataclass(frozen=True, slots=True)
class CropOperation:
    """Cut `rect` out of the current image."""

    rect: CropRect

    def to_dict(self) -> dict:
        """Serialize for logging and JSON."""
        return {"crop": self.rect.to_dict()}


@dataclass(frozen=True, slots=True)
class ResizeOperation:
    """Scale the current image to exactly `size`."""

    size: Dimensions

    def to_dict(self) -> dict:
        """Serialize for logging and JSON."""
        return {"resize": self.size.to_dict()}


Operation = Union[CropOperation, ResizeOperation]


@dataclass(frozen=True, slots=True)
class CropPlan:
    """
    Plan for crop mode (immutable).

    The executor crops `crop` out of the source, then scales the crop to
    exactly `output`, which always equals the requested target box.

    Attributes:
        source: Dimensions of the source image
        crop: Centered rectangle matching the target aspect ratio
        output: Final image size (the target box)

    Invariants:
        - crop lies within source
    """

    source: Dimensions
    crop: CropRect
    output: Dimensions

    def __post_init__(self) -> None:
        if not self.crop.fits_within(self.source):
            raise ValueError(f"crop {self.crop} exceeds source {self.source}")

    @property
    def mode(self) -> Mode:
        """Always Mode.CROP."""
        return Mode.CROP

    def operations(self) -> Tuple[Operation, ...]:
        """Ordered executor operations: crop, then resize."""
        return (CropOperation(self.crop), ResizeOperation(self.output))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "mode": self.mode.value,
            "source": self.source.to_dict(),
            "crop": self.crop.to_dict(),
            "output": self.output.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class ResizePlan:
    """
    Plan for resize mode (immutable).

    Attributes:
        source: Dimensions of the source image
        output: Aspect-preserving size that fits inside the target box
    """

    source: Dimensions
    output: Dimensions

    @property
    def mode(self) -> Mode:
        """Always Mode.RESIZE."""
        return Mode.RESIZE

    def operations(self) -> Tuple[Operation, ...]:
        """Ordered executor operations: a single resize."""
        return (ResizeOperation(self.output),)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "mode": self.mode.value,
            "source": self.source.to_dict(),
            "output": self.output.to_dict(),
        }


TransformPlan = Union[CropPlan, ResizePlan]
