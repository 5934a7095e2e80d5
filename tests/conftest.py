import pytest
import struct
import sys
import zlib
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import catalog_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def landscape_photo(tmp_path: Path):
    """1600x900 PNG, the usual phone landscape ratio."""
    img = Image.new("RGB", (1600, 900), color="white")
    img_path = tmp_path / "landscape.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def portrait_photo(tmp_path: Path):
    """300x600 PNG."""
    img = Image.new("RGB", (300, 600), color="blue")
    img_path = tmp_path / "portrait.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def transparent_photo(tmp_path: Path):
    """RGBA PNG with an alpha channel."""
    img = Image.new("RGBA", (200, 100), color=(255, 0, 0, 128))
    img_path = tmp_path / "transparent.png"
    img.save(img_path)
    return img_path


def _png_chunk(chunk_type: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(chunk_type + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + chunk_type + data + struct.pack(">I", crc)


@pytest.fixture
def oversized_photo(tmp_path: Path):
    """PNG header claiming 20000x20000 RGB, well past PIL's pixel limit."""
    header = struct.pack(">IIBBBBB", 20000, 20000, 8, 2, 0, 0, 0)
    img_path = tmp_path / "oversized.png"
    img_path.write_bytes(
        b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", header) + _png_chunk(b"IEND", b"")
    )
    return img_path
