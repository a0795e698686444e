import io

import pytest
from PIL import Image, features

from emote_converter.services.errors import DecodeError, FileIOError
from emote_converter.services.image_service import ImageService


def _encode(img: Image.Image, fmt: str, **params) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format=fmt, **params)
    return buf.getvalue()


@pytest.fixture
def service() -> ImageService:
    return ImageService()


def test_decode_png_to_rgba(service):
    data = _encode(Image.new("RGB", (10, 6), (1, 2, 3)), "PNG")
    image = service.decode_bytes(data, "png")
    assert image.pil_image.mode == "RGBA"
    assert (image.width, image.height) == (10, 6)
    assert image.source_format == "PNG"
    assert image.has_transparency is False
    assert image.size_bytes == len(data)


def test_decode_jpeg_with_jpg_hint(service):
    data = _encode(Image.new("RGB", (8, 8), (200, 10, 10)), "JPEG")
    image = service.decode_bytes(data, ".JPG")
    assert image.source_format == "JPEG"
    assert image.pil_image.size == (8, 8)


def test_gif_decodes_first_frame_only(service):
    first = Image.new("RGB", (4, 4), (255, 0, 0))
    second = Image.new("RGB", (4, 4), (0, 0, 255))
    data = _encode(first, "GIF", save_all=True, append_images=[second], duration=100)
    image = service.decode_bytes(data, "gif")
    assert image.frame_count == 2
    assert image.is_animated
    assert image.pil_image.getpixel((0, 0))[:3] == (255, 0, 0)


def test_unknown_hint_sniffs_content(service):
    data = _encode(Image.new("RGBA", (3, 3), (0, 0, 0, 0)), "PNG")
    image = service.decode_bytes(data, "bin")
    assert image.source_format == "PNG"
    assert image.has_transparency is True


def test_recognized_hint_does_not_fall_back(service):
    data = _encode(Image.new("RGB", (3, 3)), "PNG")
    with pytest.raises(DecodeError) as info:
        service.decode_bytes(data, "jpg")
    assert info.value.format == "JPEG"


def test_garbage_bytes_raise_decode_error(service):
    with pytest.raises(DecodeError) as info:
        service.decode_bytes(b"definitely not an image", "png")
    assert info.value.format == "PNG"
    assert info.value.__cause__ is not None


def test_truncated_png_raises_decode_error(service):
    data = _encode(Image.new("RGB", (64, 64), (9, 9, 9)), "PNG")
    with pytest.raises(DecodeError):
        service.decode_bytes(data[: len(data) // 2], "png")


@pytest.mark.skipif(not features.check("webp"), reason="Pillow built without WebP")
def test_decode_webp(service):
    data = _encode(Image.new("RGBA", (5, 7), (0, 128, 0, 128)), "WEBP", lossless=True)
    image = service.decode_bytes(data, "webp")
    assert image.source_format == "WEBP"
    assert image.has_transparency is True


def test_decode_stream(service):
    data = _encode(Image.new("RGB", (2, 2)), "PNG")
    image = service.decode_stream(io.BytesIO(data), "png")
    assert image.pil_image.size == (2, 2)


def test_load_image_sets_path(service, cat_png):
    image = service.load_image(cat_png)
    assert image.path == cat_png
    assert (image.width, image.height) == (120, 80)


def test_load_missing_file_raises_io_error(service, tmp_path):
    with pytest.raises(FileIOError):
        service.load_image(tmp_path / "missing.png")


def test_load_directory_raises_io_error(service, tmp_path):
    with pytest.raises(OSError):
        service.load_image(tmp_path)


def test_webm_extension_fails_decode(service, tmp_path):
    clip = tmp_path / "clip.webm"
    clip.write_bytes(b"\x1aE\xdf\xa3" + b"\x00" * 64)
    with pytest.raises(DecodeError) as info:
        service.load_image(clip)
    assert info.value.format == "auto"
