import pytest

from starfall.config import (
    ENEMIES_PER_ROW,
    ENEMY_DIRECTION,
    ENEMY_DROP,
    ENEMY_ROWS,
    ENEMY_SIZE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from starfall.formation import (
    RIGHT_LIMIT,
    create_enemy_formation,
    horizontal_speed,
    recycle_leaked_enemies,
    update_formation,
)


def test_formation_is_a_row_major_grid():
    formation = create_enemy_formation()

    assert len(formation) == ENEMY_ROWS * ENEMIES_PER_ROW
    assert formation.direction == ENEMY_DIRECTION
    first, second, ninth = formation.enemies[0], formation.enemies[1], formation.enemies[8]
    assert (first.x, first.y, first.row, first.col) == (100, 100, 0, 0)
    assert (second.x, second.y, second.row, second.col) == (150, 100, 0, 1)
    assert (ninth.x, ninth.y, ninth.row, ninth.col) == (100, 150, 1, 0)


def test_every_enemy_moves_by_the_same_delta_without_a_bounce(rng):
    formation = create_enemy_formation()
    before = [(enemy.x, enemy.y) for enemy in formation]

    update_formation(formation, level=3, rng=rng)

    delta = ENEMY_DIRECTION * (0.5 + 3 * 0.1)
    for (x, y), enemy in zip(before, formation):
        assert enemy.x == pytest.approx(x + delta)
        assert enemy.y == y
    assert formation.direction == ENEMY_DIRECTION


def test_speed_rises_with_level():
    assert horizontal_speed(1) == pytest.approx(0.6)
    assert horizontal_speed(5) == pytest.approx(1.0)
    assert horizontal_speed(2) > horizontal_speed(1)


def test_right_wall_bounce_flips_direction_and_drops(make_formation, rng):
    # ratio 2, enemy size 30, width 800: the right limit is 770
    assert RIGHT_LIMIT == 770
    formation = make_formation([(770, 100), (700, 100), (600, 200)])

    update_formation(formation, level=1, rng=rng)

    assert formation.direction == -ENEMY_DIRECTION
    assert [enemy.y for enemy in formation] == [110, 110, 210]
    assert formation.enemies[0].x == pytest.approx(770 - 1.2)


def test_no_bounce_just_short_of_the_wall(make_formation, rng):
    formation = make_formation([(769.9, 100)])

    update_formation(formation, level=1, rng=rng)

    assert formation.direction == ENEMY_DIRECTION
    assert formation.enemies[0].y == 100


def test_left_wall_bounce(make_formation, rng):
    formation = make_formation([(0, 100), (50, 100)], direction=-ENEMY_DIRECTION)

    update_formation(formation, level=1, rng=rng)

    assert formation.direction == ENEMY_DIRECTION
    assert [enemy.y for enemy in formation] == [100 + ENEMY_DROP] * 2
    assert formation.enemies[0].x == pytest.approx(1.2)


def test_drop_is_not_cumulative_across_ticks(make_formation, rng):
    formation = make_formation([(770, 100)])

    update_formation(formation, level=1, rng=rng)
    update_formation(formation, level=1, rng=rng)

    assert formation.enemies[0].y == 100 + ENEMY_DROP
    assert formation.direction == -ENEMY_DIRECTION


def test_empty_formation_is_a_no_op(make_formation, rng):
    formation = make_formation([])

    update_formation(formation, level=1, rng=rng)

    assert formation.enemies == []
    assert formation.direction == ENEMY_DIRECTION


def test_enemy_reaching_the_bottom_is_recycled_to_the_top(make_formation, rng):
    formation = make_formation([(400, SCREEN_HEIGHT - ENEMY_SIZE), (300, 100)])

    update_formation(formation, level=1, rng=rng)

    leaked, other = formation.enemies
    assert leaked.y == 0
    assert 0 <= leaked.x <= SCREEN_WIDTH - ENEMY_SIZE
    assert other.y == 100
    assert len(formation) == 2


def test_recycle_leaves_enemies_above_the_bottom_alone(make_formation, rng):
    formation = make_formation([(400, SCREEN_HEIGHT - ENEMY_SIZE - 1)])

    assert recycle_leaked_enemies(formation, rng) == 0
    assert formation.enemies[0].y == SCREEN_HEIGHT - ENEMY_SIZE - 1
