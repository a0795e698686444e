from pathlib import Path

import pytest
from PIL import Image

from emote_converter.models.emote_model import SizeSpec
from emote_converter.services.bundle_service import BundleService
from emote_converter.services.errors import EncodeError, WriteError

SMALL = SizeSpec("Discord", "Small", 28, 28)


@pytest.fixture
def service() -> BundleService:
    return BundleService()


def test_bundle_dir_is_sibling_of_input(service):
    assert service.bundle_dir_for(Path("/art/cat.png")) == Path("/art/cat_emote_bundle")
    assert service.bundle_dir_for("pics/my.cat.jpeg") == Path("pics/my.cat_emote_bundle")


def test_custom_suffix():
    assert BundleService("_out").bundle_dir_for("a/b.gif") == Path("a/b_out")


def test_output_filename(service):
    assert service.output_filename("cat", SizeSpec("7TV", "4x", 128, 128)) == "cat-7TV-4x-128x128.png"


def test_ensure_bundle_dir_is_idempotent(service, tmp_path):
    src = tmp_path / "nested" / "cat.png"
    first = service.ensure_bundle_dir(src)
    second = service.ensure_bundle_dir(src)
    assert first == second == tmp_path / "nested" / "cat_emote_bundle"
    assert first.is_dir()


def test_ensure_bundle_dir_failure(service, tmp_path):
    blocker = tmp_path / "cat_emote_bundle"
    blocker.write_text("not a directory")
    with pytest.raises(WriteError) as info:
        service.ensure_bundle_dir(tmp_path / "cat.png")
    assert info.value.filename == str(blocker)
    assert isinstance(info.value, OSError)


def test_write_emote_writes_png_and_overwrites(service, tmp_path):
    red = Image.new("RGBA", (28, 28), (255, 0, 0, 255))
    blue = Image.new("RGBA", (28, 28), (0, 0, 255, 128))
    path = service.write_emote(tmp_path, "cat", SMALL, red)
    assert path == tmp_path / "cat-Discord-Small-28x28.png"
    service.write_emote(tmp_path, "cat", SMALL, blue)
    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.mode == "RGBA"
        assert img.getpixel((0, 0)) == (0, 0, 255, 128)


def test_write_emote_failure_is_write_error(service, tmp_path):
    (tmp_path / SMALL.filename("cat")).mkdir()
    with pytest.raises(WriteError) as info:
        service.write_emote(tmp_path, "cat", SMALL, Image.new("RGBA", (28, 28)))
    assert info.value.cause is not None


def test_encode_failure_is_encode_error(service):
    with pytest.raises(EncodeError):
        service.encode_png(Image.new("CMYK", (4, 4)), "cat.png")
