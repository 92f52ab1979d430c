"""Card images are stored inline on the link as data URLs."""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path


def image_to_data_url(path: Path | str) -> str:
    """``data:<mime>;base64,<payload>`` for a local image file.

    Raises:
        FileNotFoundError: *path* does not exist.
        ValueError: *path* does not look like an image.
    """
    path = Path(path)
    mime, _ = mimetypes.guess_type(path.name)
    if not mime or not mime.startswith("image/"):
        raise ValueError(f"Not an image file: {path}")

    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime};base64,{payload}"
