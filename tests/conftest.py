"""Shared fixtures: small files carrying real magic-number headers."""
from pathlib import Path

import pytest

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00" + b"\x00" * 64
PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x02\x00\x00\x00" + b"\x00" * 64
GIF_BYTES = b"GIF89a\x01\x00\x01\x00\x80\x00\x00" + b"\x00" * 64
AVI_BYTES = b"RIFF\x00\x10\x00\x00AVI LIST\x00\x00\x00\x00hdrlavih" + b"\x00" * 64
FLV_BYTES = b"FLV\x01\x05\x00\x00\x00\x09\x00\x00\x00\x00" + b"\x00" * 64
PDF_BYTES = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<< /Type /Catalog >>\nendobj\n"
TEXT_BYTES = b'[project]\nname = "demo"\nversion = "0.1.0"\n'

MEDIA_FILES: dict[str, bytes] = {
    "valid_image.jpg": JPEG_BYTES,
    "valid_image.png": PNG_BYTES,
    "valid_image.gif": GIF_BYTES,
    "valid_ext_image.JpG": JPEG_BYTES,
    "invalid_ext_image_jpg.png": JPEG_BYTES,
    "invalid_ext_image.jpg.png": JPEG_BYTES,
    "valid_video.avi": AVI_BYTES,
    "valid_video.flv": FLV_BYTES,
    "valid_ext_video.AVI": AVI_BYTES,
    "invalid_ext_video_avi.flv": AVI_BYTES,
    "invalid_ext_video.avi.flv": AVI_BYTES,
    "invalid_file.pdf": PDF_BYTES,
    "unknown.toml": TEXT_BYTES,
}


@pytest.fixture
def media_dir(tmp_path: Path) -> Path:
    for name, content in MEDIA_FILES.items():
        (tmp_path / name).write_bytes(content)
    return tmp_path
