"""
Module: planning

Purpose:
    Geometry planner for preparing user photos: works out the crop rectangle
    and/or output size, leaving pixel work to an image executor.

Key Functions:
    - plan(): Plan for either mode
    - plan_crop(), plan_resize(): Mode-specific planners
"""

from .planner import MIN_EXTENT_PX, plan, plan_crop, plan_resize

__all__ = [
    "MIN_EXTENT_PX",
    "plan",
    "plan_crop",
    "plan_resize",
]
