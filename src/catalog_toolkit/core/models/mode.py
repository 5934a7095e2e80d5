"""
Module: core.models.mode

Purpose:
    Enum selecting which branch of the geometry planner runs.

Key Classes:
    - Mode: CROP or RESIZE

Used By:
    - planning.planner: plan()
    - config: ProcessingOptions
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class Mode(Enum):
    """
    How a photo is fitted to its target box.

    Attributes:
        CROP: Centered crop matching the target aspect ratio, then scaled to
              exactly the target size.
        RESIZE: Whole image scaled to fit inside the target box, aspect
                ratio preserved (one axis may end up smaller than the box).

    Example:
        >>> Mode.parse("Crop")
        <Mode.CROP: 'crop'>
    """

    CROP = "crop"
    RESIZE = "resize"

    @classmethod
    def parse(cls, value: Union[Mode, str]) -> Mode:
        """
        Accept a Mode or its (case-insensitive) string value.

        Raises:
            ValueError: If value names no mode
        """
        if isinstance(value, Mode):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"mode must be one of {choices}: {value!r}")
