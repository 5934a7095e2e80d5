"""
Module: images

Purpose:
    Collaborators around the geometry planner: a probe that reads source
    image sizes and an executor that applies plans to pixels.

Key Classes:
    - DimensionProbe / PillowDimensionProbe
    - ImageExecutor / PillowImageExecutor

Dependencies:
    - PIL: Image manipulation
"""

from .executor import ImageExecutor, ImageProcessingError, PillowImageExecutor
from .probe import DimensionProbe, DimensionProbeError, PillowDimensionProbe

__all__ = [
    "DimensionProbe",
    "DimensionProbeError",
    "ImageExecutor",
    "ImageProcessingError",
    "PillowDimensionProbe",
    "PillowImageExecutor",
]
