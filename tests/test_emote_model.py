import pytest

from emote_converter.models.config_model import ConverterConfig
from emote_converter.models.emote_model import SizeCatalog, SizeSpec, default_catalog


def test_default_catalog_contents():
    catalog = default_catalog()
    rows = [(s.platform, s.variant, s.width, s.height) for s in catalog]
    assert rows == [
        ("Discord", "Small", 28, 28),
        ("Discord", "Medium", 32, 32),
        ("Discord", "Large", 48, 48),
        ("Discord", "Animated", 128, 128),
        ("Twitch", "1.0", 28, 28),
        ("Twitch", "2.0", 56, 56),
        ("Twitch", "3.0", 112, 112),
        ("7TV", "1x", 32, 32),
        ("7TV", "2x", 64, 64),
        ("7TV", "3x", 96, 96),
        ("7TV", "4x", 128, 128),
    ]
    assert catalog.platforms() == ("Discord", "Twitch", "7TV")


def test_filename_scheme():
    assert SizeSpec("Discord", "Small", 28, 28).filename("cat") == "cat-Discord-Small-28x28.png"


def test_catalog_rejects_duplicate_variant():
    with pytest.raises(ValueError):
        SizeCatalog([SizeSpec("Twitch", "1.0", 28, 28), SizeSpec("Twitch", "1.0", 56, 56)])


def test_catalog_rejects_filename_collision():
    with pytest.raises(ValueError):
        SizeCatalog([SizeSpec("A-B", "C", 28, 28), SizeSpec("A", "B-C", 28, 28)])


@pytest.mark.parametrize("width,height", [(0, 28), (28, 0), (-1, 5)])
def test_size_spec_requires_positive_dimensions(width, height):
    with pytest.raises(ValueError):
        SizeSpec("Discord", "Bad", width, height)


def test_catalog_is_read_only():
    catalog = default_catalog()
    assert isinstance(catalog.specs, tuple)
    assert not hasattr(catalog, "append")
    with pytest.raises(Exception):
        catalog[0].width = 1


def test_config_from_env():
    config = ConverterConfig.from_env({"EMOTE_CONVERTER_WORKERS": "2", "EMOTE_CONVERTER_EXTENDED": "yes"})
    assert config.max_workers == 2
    assert config.extended_formats is True
    assert len(config.catalog) == 11


def test_config_from_env_defaults():
    config = ConverterConfig.from_env({})
    assert config.max_workers >= 1
    assert config.extended_formats is False


@pytest.mark.parametrize("env", [{"EMOTE_CONVERTER_WORKERS": "many"}, {"EMOTE_CONVERTER_WORKERS": "0"}, {"EMOTE_CONVERTER_EXTENDED": "maybe"}])
def test_config_from_env_rejects_bad_values(env):
    with pytest.raises(ValueError):
        ConverterConfig.from_env(env)
