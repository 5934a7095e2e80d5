"""
Core Models Package

Immutable, validated value types passed between the planner, the image
collaborators and the processing pipeline.

All models in this package are frozen dataclasses, created per call and
never mutated, so they are safe to share between threads.
"""

from .dimensions import CropRect, Dimensions, InvalidDimensionsError
from .mode import Mode
from .plans import (
    CropOperation,
    CropPlan,
    Operation,
    ResizeOperation,
    ResizePlan,
    TransformPlan,
)

__all__ = [
    "CropOperation",
    "CropPlan",
    "CropRect",
    "Dimensions",
    "InvalidDimensionsError",
    "Mode",
    "Operation",
    "ResizeOperation",
    "ResizePlan",
    "TransformPlan",
]
