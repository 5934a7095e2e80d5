"""
Module: images.executor

Purpose:
    Carry out a transformation plan on real pixels: apply the ordered
    crop/resize operations and encode the result with the output policy.

Key Classes:
    - ImageExecutor: Abstract interface for applying operations
    - PillowImageExecutor: Standard executor backed by PIL
    - ImageProcessingError: Crop/resize/encode failed

Dependencies:
    - PIL: Decoding, cropping, resampling and encoding
    - catalog_toolkit.core.models: CropOperation, ResizeOperation
    - catalog_toolkit.config: OutputPolicy

Used By:
    - processor: process_image()
"""

from __future__ import annotations

import logging
import tempfile
from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from PIL import Image, UnidentifiedImageError

from catalog_toolkit.config import OutputPolicy
from catalog_toolkit.core.models import CropOperation, Operation, ResizeOperation

logger = logging.getLogger(__name__)

ImageSource = Union[str, PathLike]

# Pixel modes each encoder accepts without conversion
_ENCODER_MODES = {
    "JPEG": ("1", "L", "RGB", "CMYK"),
    "PNG": ("1", "L", "LA", "P", "RGB", "RGBA", "I", "I;16"),
    "WEBP": ("RGB", "RGBA"),
}


class ImageProcessingError(Exception):
    """Planned crop/resize/encode could not be performed."""
    pass


class ImageExecutor(ABC):
    """
    Abstract interface for applying a plan's operations to an image.

    Implementations write the whole result or nothing; any failure raises
    ImageProcessingError.
    """

    @abstractmethod
    def execute(
        self,
        source: ImageSource,
        operations: Sequence[Operation],
        destination: ImageSource,
        policy: Optional[OutputPolicy] = None,
    ) -> Path:
        """
        Apply `operations` in order to `source` and write the result.

        Args:
            source: Path to the source image
            operations: Ordered crop/resize operations
            destination: Path for the encoded result
            policy: Encoding policy (default: JPEG, quality 80)

        Returns:
            Path to the written image

        Raises:
            ImageProcessingError: If any step fails
        """


class PillowImageExecutor(ImageExecutor):
    """
    Executor backed by PIL.

    Crops with Image.crop, scales with LANCZOS resampling and encodes via
    Image.save. Output is written atomically (temp file then replace).

    Example:
        >>> plan = planner.plan((1600, 900), (400, 400), "crop")
        >>> PillowImageExecutor().execute("in.png", plan.operations(), "out.jpg")
        PosixPath('out.jpg')
    """

    def __init__(self, resample: Image.Resampling = Image.Resampling.LANCZOS) -> None:
        self._resample = resample

    def execute(
        self,
        source: ImageSource,
        operations: Sequence[Operation],
        destination: ImageSource,
        policy: Optional[OutputPolicy] = None,
    ) -> Path:
        policy = policy or OutputPolicy()
        source_path = Path(source)
        destination_path = Path(destination)

        try:
            with Image.open(source_path) as img:
                img.load()
                result = img
                for operation in operations:
                    result = self._apply(result, operation)
                result = _convert_for_encoder(result, policy.format)
                _atomic_write_image(result, destination_path, policy)
        except ImageProcessingError:
            raise
        except FileNotFoundError as e:
            raise ImageProcessingError(f"Source image not found: {source_path}") from e
        except UnidentifiedImageError as e:
            raise ImageProcessingError(f"Unrecognised image format: {source_path}") from e
        except Image.DecompressionBombError as e:
            raise ImageProcessingError(f"Image too large: {source_path}: {e}") from e
        except (OSError, ValueError) as e:
            raise ImageProcessingError(f"Failed to process {source_path}: {e}") from e

        logger.debug(
            f"Wrote {destination_path.name} ({policy.format}, quality {policy.quality}) "
            f"after {len(operations)} operation(s)"
        )
        return destination_path

    def _apply(self, image: Image.Image, operation: Operation) -> Image.Image:
        """Apply a single operation, returning a new image."""
        if isinstance(operation, CropOperation):
            rect = operation.rect
            if rect.right > image.width or rect.bottom > image.height:
                raise ImageProcessingError(
                    f"Crop {rect.as_box()} exceeds image size {image.size}"
                )
            return image.crop(rect.as_box())
        if isinstance(operation, ResizeOperation):
            return image.resize(operation.size.as_tuple(), self._resample)
        raise ImageProcessingError(f"Unsupported operation: {operation!r}")


def _convert_for_encoder(image: Image.Image, image_format: str) -> Image.Image:
    """Convert to a pixel mode the encoder accepts (e.g. JPEG has no alpha)."""
    allowed = _ENCODER_MODES.get(image_format, ("RGB",))
    if image.mode in allowed:
        return image
    has_alpha = "A" in image.getbands() or "transparency" in image.info
    if has_alpha and "RGBA" in allowed:
        return image.convert("RGBA")
    return image.convert("RGB")


def _atomic_write_image(image: Image.Image, path: Path, policy: OutputPolicy) -> None:
    """Write image atomically using temp file."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            suffix=f".{policy.extension}",
            dir=path.parent,
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            image.save(f, format=policy.format, **policy.save_options())
        # Use replace() instead of rename() for Windows compatibility
        temp_path.replace(path)
    except BaseException:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise
