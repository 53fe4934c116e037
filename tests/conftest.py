"""Shared fixtures for building synthetic template pages."""

from typing import Tuple

import cv2
import fitz
import numpy as np
import pytest

from template_analyzer import PixelBuffer

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def blank_page(width: int, height: int, rgba: Tuple[int, int, int, int] = WHITE) -> np.ndarray:
    """Return a writable RGBA array of a single color."""
    page = np.empty((height, width, 4), dtype=np.uint8)
    page[:] = rgba
    return page


def checkerboard(page: np.ndarray, x: int, y: int, width: int, height: int) -> np.ndarray:
    """Paint a 1px black/white checkerboard into a region of the page."""
    ys, xs = np.mgrid[y:y + height, x:x + width]
    dark = (xs + ys) % 2 == 0
    page[y:y + height, x:x + width, :3] = np.where(dark[..., None], 0, 255)
    page[y:y + height, x:x + width, 3] = 255
    return page


def encode_png(page: np.ndarray) -> bytes:
    """Encode an RGBA array as PNG bytes."""
    ok, encoded = cv2.imencode(".png", cv2.cvtColor(page, cv2.COLOR_RGBA2BGRA))
    assert ok
    return encoded.tobytes()


def build_pdf(text: str = "Jane Doe", fontname: str = "helv", divider_y: float = None) -> bytes:
    """Build a one-page 200x200pt PDF with a line of text."""
    doc = fitz.open()
    page = doc.new_page(width=200, height=200)
    page.insert_text((20, 40), text, fontname=fontname, fontsize=14)
    if divider_y is not None:
        page.draw_line((10, divider_y), (190, divider_y), color=(0, 0, 0), width=2)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def divider_page() -> np.ndarray:
    """800x1000 white page with one black 700px line at y=500."""
    page = blank_page(800, 1000)
    page[500, 50:750] = BLACK
    return page


@pytest.fixture
def divider_png(divider_page) -> bytes:
    return encode_png(divider_page)


@pytest.fixture
def white_buffer() -> PixelBuffer:
    return PixelBuffer.filled(200, 200, WHITE)
