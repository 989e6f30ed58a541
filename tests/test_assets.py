import pytest

from tetrablocks.assets import Assets


@pytest.fixture(scope="module")
def loaded():
    assets = Assets()
    assets.init(None)
    return assets


def test_font_sizes_from_source():
    assets = Assets()
    assert assets.font_title.size == 64
    assert assets.font_small.size == 18
    assert assets.font.size == 48


def test_init_loads_latin_glyphs(loaded):
    for font in (loaded.font, loaded.font_title, loaded.font_small):
        assert font.at(ord("A")) is not None
        assert font.at(ord("~")) is not None
        assert font.width("AB") > 0


def test_larger_font_is_wider(loaded):
    assert loaded.font_title.width("Play") > loaded.font_small.width("Play")


def test_clear_drops_glyphs_and_sizes():
    assets = Assets()
    assets.init(None)
    assets.clear()
    for font in (assets.font, assets.font_title, assets.font_small):
        assert font.size == 0
        assert font.at(ord("A")) is None
        assert font.width("AB") == 0


def test_missing_font_file(tmp_path):
    assets = Assets()
    with pytest.raises(FileNotFoundError):
        assets.init(tmp_path / "missing.otf")