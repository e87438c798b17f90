from starfall.config import ENEMIES_PER_ROW, ENEMY_DIRECTION, ENEMY_ROWS
from starfall.events import GameEvent
from starfall.formation import create_enemy_formation
from starfall.levels import check_wave_cleared


def test_cleared_wave_advances_level_and_reseeds(make_formation):
    cleared = make_formation([], direction=-ENEMY_DIRECTION)

    formation, level, events = check_wave_cleared(cleared, level=4)

    assert level == 5
    assert events == [GameEvent.LEVEL_UP]
    assert len(formation) == ENEMY_ROWS * ENEMIES_PER_ROW
    assert formation.direction == ENEMY_DIRECTION
    canonical = create_enemy_formation()
    assert [(e.x, e.y, e.row, e.col) for e in formation] == [
        (e.x, e.y, e.row, e.col) for e in canonical
    ]


def test_active_wave_is_left_untouched(make_formation):
    active = make_formation([(100, 100)])

    formation, level, events = check_wave_cleared(active, level=2)

    assert formation is active
    assert level == 2
    assert events == []
