import itertools

import pytest

from tetrablocks.utils import (
    ASSETS_DIR,
    compare_vec2,
    for_xy,
    get_asset,
    in_rect,
    rand_color,
    random_point,
)


def test_for_xy_covers_every_cell_once():
    cells = list(for_xy((2, 3)))
    assert len(cells) == 2 * 3
    assert set(cells) == set(itertools.product(range(2), range(3)))


def test_for_xy_is_column_major():
    cells = list(for_xy((3, 4)))
    assert cells == sorted(cells)
    assert cells[0] == (0, 0)


def test_for_xy_empty_size_yields_nothing():
    assert list(for_xy((0, 5))) == []
    assert list(for_xy((5, 0))) == []


def test_get_asset_joins_to_assets_dir():
    path = get_asset("/fonts/Constance.otf")
    assert path == ASSETS_DIR + "/fonts/Constance.otf"


@pytest.mark.parametrize(
    "point, expected",
    [
        ((0, 0), True),
        ((10, 10), True),
        ((5, 3), True),
        ((10.5, 5), False),
        ((-0.1, 5), False),
        ((5, 11), False),
    ],
)
def test_in_rect_edges_included(point, expected):
    assert in_rect((0, 0, 10, 10), point) is expected


def test_compare_vec2_orders_by_x_then_y():
    assert compare_vec2((1, 5), (2, 0)) < 0
    assert compare_vec2((2, 0), (2, 0)) == 0
    assert compare_vec2((2, 1), (2, 0)) > 0
    assert compare_vec2((3, 0), (2, 9)) > 0


def test_compare_vec2_is_antisymmetric():
    pairs = [((0, 0), (1, 1)), ((4, 2), (4, 7)), ((9, 9), (1, 0))]
    for a, b in pairs:
        assert compare_vec2(a, b) == -compare_vec2(b, a)


def test_rand_color_is_opaque():
    for _ in range(50):
        color = rand_color()
        assert color >> 24 == 0xFF
        assert 0xFF000000 <= color <= 0xFFFFFFFF


def test_random_point_stays_in_bounds():
    for _ in range(50):
        x, y = random_point((2.0, -3.0), (4.0, -1.0))
        assert 2.0 <= x <= 4.0
        assert -3.0 <= y <= -1.0


def test_random_point_default_box():
    for _ in range(50):
        x, y = random_point()
        assert -1.0 <= x <= 1.0
        assert -1.0 <= y <= 1.0