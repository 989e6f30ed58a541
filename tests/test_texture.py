import pytest

from tetrablocks.texture import (
    Texture,
    TextureFilter,
    TextureFormat,
    TextureMinFilter,
    TextureWrap,
)


@pytest.mark.parametrize(
    "fmt, bpp",
    [(TextureFormat.RGBA, 4), (TextureFormat.RGB, 3), (TextureFormat.MONO, 1)],
)
def test_alloc_sets_bytes_per_pixel(fmt, bpp):
    tex = Texture()
    tex.alloc(1, 1, fmt)
    assert tex.bpp == bpp
    assert len(tex.pixels) == bpp


def test_new_texture_is_empty():
    tex = Texture()
    assert tex.size == (0, 0)
    assert tex.bpp == 1
    assert tex.allocated is False
    assert tex.pixels == b""


def test_alloc_zero_filled():
    tex = Texture()
    tex.alloc(2, 3, TextureFormat.RGBA)
    assert tex.size == (2, 3)
    assert tex.bpp == 4
    assert tex.pixels == bytes(2 * 3 * 4)


def test_alloc_copies_buffer():
    data = bytes(range(12))
    tex = Texture()
    tex.alloc(2, 2, TextureFormat.RGB, data)
    assert tex.pixels == data


def test_alloc_rejects_wrong_buffer_length():
    with pytest.raises(ValueError):
        Texture().alloc(2, 2, TextureFormat.RGBA, bytes(15))


def test_subdata_writes_region():
    tex = Texture()
    tex.alloc(3, 3, TextureFormat.MONO)
    tex.subdata(1, 1, 2, 2, TextureFormat.MONO, bytes([1, 2, 3, 4]))
    assert tex.pixels == bytes([0, 0, 0, 0, 1, 2, 0, 3, 4])


def test_subdata_changes_revision():
    tex = Texture()
    tex.alloc(2, 2, TextureFormat.MONO)
    before = tex.revision
    tex.subdata(0, 0, 1, 1, TextureFormat.MONO, b"\x09")
    assert tex.revision > before


def test_subdata_out_of_bounds():
    tex = Texture()
    tex.alloc(2, 2, TextureFormat.MONO)
    with pytest.raises(ValueError):
        tex.subdata(1, 1, 2, 2, TextureFormat.MONO, bytes(4))


def test_subdata_format_mismatch():
    tex = Texture()
    tex.alloc(2, 2, TextureFormat.MONO)
    with pytest.raises(ValueError):
        tex.subdata(0, 0, 1, 1, TextureFormat.RGBA, bytes(4))


def test_subdata_without_allocation():
    with pytest.raises(RuntimeError):
        Texture().subdata(0, 0, 1, 1, TextureFormat.MONO, b"\x00")


def test_dealloc_releases_buffer():
    tex = Texture()
    tex.alloc(4, 4, TextureFormat.RGB)
    tex.dealloc()
    assert tex.size == (0, 0)
    assert tex.allocated is False
    with pytest.raises(RuntimeError):
        tex.subdata(0, 0, 1, 1, TextureFormat.RGB, bytes(3))


def test_save_without_allocation(tmp_path):
    with pytest.raises(RuntimeError):
        Texture().save_to(tmp_path / "none.png")


def test_rgba_round_trip(tmp_path):
    data = bytes(range(16))
    tex = Texture()
    tex.alloc(2, 2, TextureFormat.RGBA, data)
    path = tmp_path / "rgba.png"
    tex.save_to(path)

    loaded = Texture(path)
    assert loaded.size == (2, 2)
    assert loaded.format is TextureFormat.RGBA
    assert loaded.pixels == data


def test_mono_saved_as_grey(tmp_path):
    values = [0, 64, 128, 255]
    tex = Texture()
    tex.alloc(2, 2, TextureFormat.MONO, bytes(values))
    path = tmp_path / "mono.png"
    tex.save_to(path)

    loaded = Texture()
    loaded.load(path)
    expected = b"".join(bytes([v, v, v, 255]) for v in values)
    assert loaded.pixels == expected


def test_load_sets_sampling(tmp_path):
    tex = Texture()
    tex.alloc(1, 1, TextureFormat.RGB, b"\x01\x02\x03")
    path = tmp_path / "one.png"
    tex.save_to(path)

    loaded = Texture(path)
    assert loaded.wrap_s is TextureWrap.REPEAT
    assert loaded.wrap_t is TextureWrap.REPEAT
    assert loaded.min_filter is TextureMinFilter.LINEAR_LINEAR
    assert loaded.mag_filter is TextureFilter.LINEAR
    assert loaded.mipmaps is True


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Texture(tmp_path / "missing.png")