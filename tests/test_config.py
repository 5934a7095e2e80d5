"""
Unit tests for OutputPolicy, ProcessingOptions and load_options().
"""

import json

import pytest

from catalog_toolkit.config import (
    ConfigError,
    OutputPolicy,
    ProcessingOptions,
    load_options,
)
from catalog_toolkit.core.models import Dimensions, InvalidDimensionsError, Mode


class TestOutputPolicy:
    """Tests for OutputPolicy dataclass."""

    def test_defaults_are_jpeg_quality_80(self):
        policy = OutputPolicy()
        assert policy.format == "JPEG"
        assert policy.quality == 80
        assert policy.extension == "jpg"
        assert policy.save_options() == {"quality": 80}

    @pytest.mark.parametrize("value,expected", [("jpg", "JPEG"), ("png", "PNG"), ("WebP", "WEBP")])
    def test_init_when_lowercase_format_then_normalises(self, value, expected):
        assert OutputPolicy(format=value).format == expected

    def test_init_when_unsupported_format_then_raises_error(self):
        with pytest.raises(ValueError, match="format must be one of"):
            OutputPolicy(format="GIF")

    @pytest.mark.parametrize("quality", [0, 96, -1])
    def test_init_when_quality_out_of_range_then_raises_error(self, quality):
        with pytest.raises(ValueError, match="quality must be between 1 and 95"):
            OutputPolicy(quality=quality)

    def test_init_when_quality_not_int_then_raises_error(self):
        with pytest.raises(ValueError, match="quality must be an integer"):
            OutputPolicy(quality=0.8)

    def test_png_is_lossless(self):
        policy = OutputPolicy(format="PNG")
        assert not policy.is_lossy
        assert "quality" not in policy.save_options()


class TestProcessingOptions:
    """Tests for ProcessingOptions dataclass."""

    def test_init_when_string_mode_then_parses(self):
        options = ProcessingOptions(mode="Resize", target_width=100, target_height=50)
        assert options.mode is Mode.RESIZE
        assert options.target == Dimensions(100, 50)

    def test_init_when_bad_mode_then_raises_error(self):
        with pytest.raises(ValueError, match="mode must be one of"):
            ProcessingOptions(mode="zoom", target_width=100, target_height=50)

    def test_init_when_zero_target_then_raises_invalid_dimensions(self):
        with pytest.raises(InvalidDimensionsError):
            ProcessingOptions(mode="crop", target_width=0, target_height=50)

    def test_to_dict_from_dict_preserves_values(self):
        options = ProcessingOptions(
            mode=Mode.CROP, target_width=400, target_height=300, output=OutputPolicy(quality=70)
        )
        assert ProcessingOptions.from_dict(options.to_dict()) == options

    def test_from_dict_when_output_missing_then_uses_default_policy(self):
        options = ProcessingOptions.from_dict({"mode": "crop", "target_width": 1, "target_height": 1})
        assert options.output == OutputPolicy()

    def test_from_dict_when_key_missing_then_raises_config_error(self):
        with pytest.raises(ConfigError, match="Missing option: target_height"):
            ProcessingOptions.from_dict({"mode": "crop", "target_width": 1})

    def test_from_dict_when_value_invalid_then_raises_config_error(self):
        with pytest.raises(ConfigError, match="Invalid options"):
            ProcessingOptions.from_dict({"mode": "crop", "target_width": -1, "target_height": 1})


class TestLoadOptions:
    """Tests for load_options()."""

    def test_load_when_valid_file_then_returns_options(self, tmp_path):
        # Arrange
        path = tmp_path / "options.json"
        path.write_text(json.dumps({
            "mode": "resize",
            "target_width": 1024,
            "target_height": 768,
            "output": {"format": "webp", "quality": 60},
        }))

        # Act
        options = load_options(path)

        # Assert
        assert options.mode is Mode.RESIZE
        assert options.target == Dimensions(1024, 768)
        assert options.output == OutputPolicy(format="WEBP", quality=60)

    def test_load_when_missing_file_then_raises_config_error(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_options(tmp_path / "nope.json")

    def test_load_when_corrupt_json_then_raises_config_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{mode: crop")
        with pytest.raises(ConfigError, match="corrupted"):
            load_options(path)

    def test_load_when_not_an_object_then_raises_config_error(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_options(path)
