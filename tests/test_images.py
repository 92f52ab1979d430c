# Tests for card image encoding
# Created: 2026-10-18

import base64

import pytest

from servicedash.client.images import image_to_data_url


def test_png_becomes_data_url(tmp_path):
    path = tmp_path / "logo.png"
    path.write_bytes(b"\x89PNG\r\n")
    url = image_to_data_url(path)
    assert url.startswith("data:image/png;base64,")
    assert base64.b64decode(url.split(",", 1)[1]) == b"\x89PNG\r\n"


def test_non_image_rejected(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    with pytest.raises(ValueError):
        image_to_data_url(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        image_to_data_url(tmp_path / "gone.png")
