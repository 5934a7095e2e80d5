"""
Module: planning.planner

Purpose:
    Compute the geometry for fitting a photo into a target box. Pure
    functions: no I/O, no shared state, safe to call from any thread.

Key Functions:
    - plan(): Dispatch on mode and return a TransformPlan
    - plan_crop(): Centered aspect-matched crop, then stretch to target
    - plan_resize(): Aspect-preserving fit inside the target box

Algorithm:
    Ratios are compared and floored in exact integer arithmetic:
        source_ratio > target_ratio  <=>  sw * th > tw * sh
    so a result never lands on the wrong side of a pixel boundary because
    of float error. Equal ratios take the "else" branch in both modes.

Dependencies:
    - core.models: Dimensions, CropRect, Mode, CropPlan, ResizePlan

Used By:
    - processor: process_image()
"""

from __future__ import annotations

from typing import Union

from catalog_toolkit.core.models import (
    CropPlan,
    CropRect,
    Dimensions,
    Mode,
    ResizePlan,
    TransformPlan,
)
from catalog_toolkit.core.models.dimensions import DimensionsLike

# Smallest extent a plan may carry; flooring alone can reach 0 for extreme ratios
MIN_EXTENT_PX = 1


def _is_wider(source: Dimensions, target: Dimensions) -> bool:
    """True if source is strictly wider (relative to height) than target."""
    return source.width * target.height > target.width * source.height


def plan_crop(source: Dimensions, target: Dimensions) -> CropPlan:
    """
    Plan a centered crop matching the target aspect ratio.

    If the source is relatively wider, the crop keeps the full source height
    and trims the sides; otherwise it keeps the full width and trims top and
    bottom. The executor then scales the crop to exactly `target`.

    Args:
        source: Source image size
        target: Requested output size

    Returns:
        CropPlan whose output equals target

    Example:
        >>> plan_crop(Dimensions(1600, 900), Dimensions(400, 400)).crop
        CropRect(origin_x=350, origin_y=0, width=900, height=900)
    """
    sw, sh = source.width, source.height
    tw, th = target.width, target.height

    if _is_wider(source, target):
        # crop_w = sh * (tw / th); origin_x = floor((sw - crop_w) / 2)
        crop_w = max(MIN_EXTENT_PX, (sh * tw) // th)
        crop_h = sh
        origin_x = (sw * th - sh * tw) // (2 * th)
        origin_y = 0
    else:
        # crop_h = sw / (tw / th); origin_y = floor((sh - crop_h) / 2)
        crop_w = sw
        crop_h = max(MIN_EXTENT_PX, (sw * th) // tw)
        origin_x = 0
        origin_y = (sh * tw - sw * th) // (2 * tw)

    rect = CropRect(origin_x=origin_x, origin_y=origin_y, width=crop_w, height=crop_h)
    return CropPlan(source=source, crop=rect, output=target)


def plan_resize(source: Dimensions, target: Dimensions) -> ResizePlan:
    """
    Plan an aspect-preserving fit inside the target box.

    The constrained axis matches the target exactly; the other is floored,
    so the output never exceeds the box.

    Example:
        >>> plan_resize(Dimensions(1600, 900), Dimensions(400, 400)).output
        Dimensions(400x225)
    """
    sw, sh = source.width, source.height
    tw, th = target.width, target.height

    if _is_wider(source, target):
        # out_h = floor(tw / (sw / sh))
        output = Dimensions(tw, max(MIN_EXTENT_PX, (tw * sh) // sw))
    else:
        # out_w = floor(th * (sw / sh))
        output = Dimensions(max(MIN_EXTENT_PX, (th * sw) // sh), th)

    return ResizePlan(source=source, output=output)


def plan(
    source: DimensionsLike,
    target: DimensionsLike,
    mode: Union[Mode, str],
) -> TransformPlan:
    """
    Compute the transformation plan for fitting `source` into `target`.

    Args:
        source: Source image size, as Dimensions or (width, height)
        target: Target box, as Dimensions or (width, height)
        mode: Mode.CROP / Mode.RESIZE or "crop" / "resize"

    Returns:
        CropPlan for crop mode, ResizePlan for resize mode

    Raises:
        InvalidDimensionsError: If either size is non-positive, non-finite
            or fractional
        ValueError: If mode is not recognised
    """
    source = Dimensions.coerce(source)
    target = Dimensions.coerce(target)
    mode = Mode.parse(mode)

    if mode is Mode.CROP:
        return plan_crop(source, target)
    return plan_resize(source, target)
