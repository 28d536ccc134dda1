from brickbreak.entities import BrickKind
from brickbreak.level import MAX_LEVEL, create_level

WORLD_W = 800.0


def test_level_1_has_40_bricks():
    assert len(create_level(1, WORLD_W).bricks) == 40


def test_level_1_all_normal_bricks():
    assert all(b.kind is BrickKind.NORMAL for b in create_level(1, WORLD_W).bricks)


def test_level_2_has_50_bricks():
    assert len(create_level(2, WORLD_W).bricks) == 50


def test_level_2_first_row_is_indestructible():
    first_row = create_level(2, WORLD_W).bricks[:10]
    assert all(b.kind is BrickKind.INDESTRUCTIBLE for b in first_row)


def test_level_2_rows_two_and_three_are_tough_last_normal():
    bricks = create_level(2, WORLD_W).bricks
    assert all(b.kind is BrickKind.TOUGH for b in bricks[10:30])
    assert all(b.kind is BrickKind.NORMAL for b in bricks[30:])


def test_level_3_has_60_bricks():
    assert len(create_level(3, WORLD_W).bricks) == 60


def test_level_3_is_checkerboard():
    bricks = create_level(3, WORLD_W).bricks
    assert bricks[0].kind is BrickKind.TOUGH
    assert bricks[1].kind is BrickKind.NORMAL
    assert bricks[10].kind is BrickKind.NORMAL
    assert bricks[11].kind is BrickKind.TOUGH


def test_bricks_do_not_overlap_left_wall():
    assert all(b.left() >= 0.0 for b in create_level(1, WORLD_W).bricks)


def test_bricks_do_not_overlap_right_wall():
    assert all(b.right() <= WORLD_W + 0.01 for b in create_level(1, WORLD_W).bricks)


def test_first_brick_position():
    first = create_level(1, WORLD_W).bricks[0]
    assert first.left() == 2.0
    assert first.top() == 60.0
    assert first.dimensions.height == 20.0


def test_endless_level_grows_rows():
    assert len(create_level(5, WORLD_W).bricks) >= len(create_level(4, WORLD_W).bricks)


def test_endless_level_4_has_six_rows():
    assert len(create_level(4, WORLD_W).bricks) == 60


def test_endless_level_rows_are_capped_at_ten():
    assert len(create_level(20, WORLD_W).bricks) == 100


def test_max_level_is_three():
    assert MAX_LEVEL == 3
    assert len(create_level(MAX_LEVEL, WORLD_W).bricks) == 60