"""
Module: config

Purpose:
    Configuration dataclasses for photo processing. Immutable settings with
    validation on construction, plus JSON loading.

Key Classes:
    - OutputPolicy: Encoding applied to every processed photo
    - ProcessingOptions: Mode and target box for one photo
    - ConfigError: Options file unreadable or malformed

Key Functions:
    - load_options(): Read ProcessingOptions from a JSON file

Dependencies:
    - dataclasses, json, pathlib (std)
    - core.models: Dimensions, Mode

Used By:
    - images.executor: OutputPolicy
    - processor: ProcessingOptions
    - cli: main()
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

from catalog_toolkit.core.models import Dimensions, Mode

logger = logging.getLogger(__name__)

# Lossy JPEG at quality 80 for every stored photo
DEFAULT_FORMAT = "JPEG"
DEFAULT_QUALITY = 80

SUPPORTED_FORMATS = ("JPEG", "PNG", "WEBP")
_LOSSY_FORMATS = ("JPEG", "WEBP")
_EXTENSIONS = {"JPEG": "jpg", "PNG": "png", "WEBP": "webp"}


class ConfigError(ValueError):
    """Options file could not be read or holds invalid values."""
    pass


@dataclass(frozen=True)
class OutputPolicy:
    """
    Encoding for processed photos (immutable).

    Attributes:
        format: PIL save format, one of SUPPORTED_FORMATS
        quality: Encoder quality 1-95 (ignored by lossless formats)

    Example:
        >>> OutputPolicy().extension
        'jpg'
    """

    format: str = DEFAULT_FORMAT
    quality: int = DEFAULT_QUALITY

    def __post_init__(self) -> None:
        """Validate policy on construction."""
        normalized = str(self.format).upper()
        if normalized == "JPG":
            normalized = "JPEG"
        if normalized not in SUPPORTED_FORMATS:
            raise ValueError(
                f"format must be one of {', '.join(SUPPORTED_FORMATS)}: {self.format!r}"
            )
        object.__setattr__(self, "format", normalized)
        if isinstance(self.quality, bool) or not isinstance(self.quality, int):
            raise ValueError(f"quality must be an integer: {self.quality!r}")
        if not 1 <= self.quality <= 95:
            raise ValueError(f"quality must be between 1 and 95: {self.quality}")

    @property
    def extension(self) -> str:
        """File extension (without dot) for this format."""
        return _EXTENSIONS[self.format]

    @property
    def is_lossy(self) -> bool:
        return self.format in _LOSSY_FORMATS

    def save_options(self) -> Dict[str, Any]:
        """Keyword arguments for PIL Image.save()."""
        if self.is_lossy:
            return {"quality": self.quality}
        return {"optimize": True}

    def to_dict(self) -> dict:
        return {"format": self.format, "quality": self.quality}

    @classmethod
    def from_dict(cls, data: dict) -> OutputPolicy:
        return cls(
            format=data.get("format", DEFAULT_FORMAT),
            quality=data.get("quality", DEFAULT_QUALITY),
        )


@dataclass(frozen=True)
class ProcessingOptions:
    """
    How to fit one photo (immutable).

    Attributes:
        mode: Mode.CROP or Mode.RESIZE (strings are parsed)
        target_width: Target box width in pixels
        target_height: Target box height in pixels
        output: Encoding policy for the result

    Example:
        >>> options = ProcessingOptions(mode="crop", target_width=400, target_height=400)
        >>> options.target
        Dimensions(400x400)
    """

    mode: Mode
    target_width: int
    target_height: int
    output: OutputPolicy = field(default_factory=OutputPolicy)

    def __post_init__(self) -> None:
        """Validate options on construction."""
        object.__setattr__(self, "mode", Mode.parse(self.mode))
        # Raises InvalidDimensionsError for a bad box
        target = Dimensions(self.target_width, self.target_height)
        object.__setattr__(self, "target_width", target.width)
        object.__setattr__(self, "target_height", target.height)

    @property
    def target(self) -> Dimensions:
        """Target box as Dimensions."""
        return Dimensions(self.target_width, self.target_height)

    def to_dict(self) -> dict:
        return {
            "mode": self.mode.value,
            "target_width": self.target_width,
            "target_height": self.target_height,
            "output": self.output.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ProcessingOptions:
        """
        Deserialize from dictionary.

        Raises:
            ConfigError: If a required key is missing or a value is invalid
        """
        try:
            return cls(
                mode=data["mode"],
                target_width=data["target_width"],
                target_height=data["target_height"],
                output=OutputPolicy.from_dict(data.get("output") or {}),
            )
        except KeyError as e:
            raise ConfigError(f"Missing option: {e.args[0]}") from e
        except (ValueError, TypeError, AttributeError) as e:
            raise ConfigError(f"Invalid options: {e}") from e


def load_options(path: Union[str, Path]) -> ProcessingOptions:
    """
    Load ProcessingOptions from a JSON file.

    Expected layout:
        {
          "mode": "crop",
          "target_width": 400,
          "target_height": 400,
          "output": {"format": "JPEG", "quality": 80}
        }

    Args:
        path: JSON file to read

    Returns:
        Validated ProcessingOptions

    Raises:
        ConfigError: If the file is missing, not JSON or holds invalid values
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"Options file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Options file is corrupted: {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read options {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Options file must hold a JSON object: {path}")

    options = ProcessingOptions.from_dict(data)
    logger.debug(f"Loaded options from {path}: {options.to_dict()}")
    return options
