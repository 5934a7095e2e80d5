"""
Module: processor

Purpose:
    Prepare a user photo for storage/display.
    Probe → Plan → Execute

Key Functions:
    - process_image(): Main entry point for processing one photo
    - default_destination(): Output path used when none is given

Key Classes:
    - ProcessResult: Output path plus the plan that produced it

Dependencies:
    - images: DimensionProbe, ImageExecutor (PIL-backed defaults)
    - planning: plan()
    - config: ProcessingOptions

Used By:
    - cli: main()
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from catalog_toolkit.config import ProcessingOptions
from catalog_toolkit.core.models import Dimensions, TransformPlan
from catalog_toolkit.images import (
    DimensionProbe,
    ImageExecutor,
    PillowDimensionProbe,
    PillowImageExecutor,
)
from catalog_toolkit.images.probe import ImageSource
from catalog_toolkit.planning import plan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """
    Result of processing one photo (immutable).

    Attributes:
        source: Path of the original photo
        output_path: Path of the processed photo
        plan: Plan the executor applied

    Example:
        >>> result = process_image(Path("photo.jpg"), options)
        >>> result.output_size
        Dimensions(400x400)
    """
    source: Path
    output_path: Path
    plan: TransformPlan

    @property
    def output_size(self) -> Dimensions:
        return self.plan.output


def default_destination(source: ImageSource, options: ProcessingOptions) -> Path:
    """
    Default output path: next to the source, suffixed with the mode.

    Example:
        >>> default_destination("shots/car.png", options)
        PosixPath('shots/car_crop.jpg')
    """
    source = Path(source)
    return source.with_name(f"{source.stem}_{options.mode.value}.{options.output.extension}")


def process_image(
    source: ImageSource,
    options: ProcessingOptions,
    *,
    destination: Optional[ImageSource] = None,
    probe: Optional[DimensionProbe] = None,
    executor: Optional[ImageExecutor] = None,
) -> ProcessResult:
    """
    Crop or resize a photo into the target box and encode it.

    Pipeline:
    1. Probe the source size
    2. Plan the crop/resize geometry
    3. Execute the plan and encode with the output policy

    Errors from each stage propagate unchanged; nothing is retried and no
    fallback output is produced.

    Args:
        source: Path to the source photo
        options: Mode, target box and output policy
        destination: Output path (default: see default_destination())
        probe: Size lookup (default: PillowDimensionProbe)
        executor: Pixel executor (default: PillowImageExecutor)

    Returns:
        ProcessResult with output path and plan

    Raises:
        DimensionProbeError: If the source size cannot be read
        InvalidDimensionsError: If the probed size is unusable
        ImageProcessingError: If crop/resize/encode fails

    Example:
        >>> options = ProcessingOptions(mode="crop", target_width=400, target_height=400)
        >>> result = process_image(Path("car.png"), options)
        >>> result.output_path
        PosixPath('car_crop.jpg')
    """
    if probe is None:
        probe = PillowDimensionProbe()
    if executor is None:
        executor = PillowImageExecutor()
    source_path = Path(source)
    destination_path = Path(destination) if destination is not None else default_destination(source_path, options)

    start_time = time.perf_counter()
    logger.info(
        f"Processing {source_path.name} ({options.mode.value} to "
        f"{options.target_width}x{options.target_height})"
    )

    # 1. Probe
    source_size = probe.probe(source_path)

    # 2. Plan
    transform = plan(source_size, options.target, options.mode)
    logger.debug(f"Plan for {source_path.name}: {transform.to_dict()}")

    # 3. Execute
    output_path = executor.execute(
        source_path,
        transform.operations(),
        destination_path,
        options.output,
    )

    elapsed = time.perf_counter() - start_time
    logger.info(f"Wrote {output_path} ({transform.output}) in {elapsed:.2f}s")
    return ProcessResult(source=source_path, output_path=output_path, plan=transform)
