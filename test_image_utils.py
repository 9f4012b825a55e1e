"""Tests for bitmap assembly and PNG encoding."""

import io

import pytest
from PIL import Image

from conftest import make_bitmap
from features.pdf_ocr.domain.entities import PageBitmap
from features.pdf_ocr.domain.errors import EncodeFailed, ImageAssemblyFailed
from features.pdf_ocr.infrastructure.utils.image_utils import (
    assemble_image,
    bitmap_to_png,
    encode_png,
)


def test_assemble_image_matches_dimensions():
    image = assemble_image(make_bitmap(1, width=5, height=2))
    assert image.mode == "RGB"
    assert image.size == (5, 2)
    assert image.getpixel((0, 0)) == (255, 255, 255)


@pytest.mark.parametrize("delta", [-1, -3, 3])
def test_assemble_image_rejects_inconsistent_buffer(delta):
    bitmap = PageBitmap(page_number=7, width=4, height=3, samples=b"\x00" * (4 * 3 * 3 + delta))

    with pytest.raises(ImageAssemblyFailed) as exc_info:
        assemble_image(bitmap)

    assert exc_info.value.page_number == 7
    assert exc_info.value.message == "Falha ao criar imagem da página 7"
    assert exc_info.value.status_code == 500


def test_assemble_image_rejects_empty_dimensions():
    with pytest.raises(ImageAssemblyFailed):
        assemble_image(PageBitmap(page_number=1, width=0, height=0, samples=b""))


def test_bitmap_to_png_roundtrips_size():
    png = bitmap_to_png(make_bitmap(2, width=6, height=4))
    assert png.startswith(b"\x89PNG")
    with Image.open(io.BytesIO(png)) as decoded:
        assert decoded.size == (6, 4)


def test_encode_png_wraps_pillow_errors(monkeypatch):
    image = assemble_image(make_bitmap(3))

    def broken_save(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(image, "save", broken_save)

    with pytest.raises(EncodeFailed) as exc_info:
        encode_png(image, 3)

    assert exc_info.value.message == "Erro ao salvar imagem da página 3: disk full"
