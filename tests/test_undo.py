from sokoban_engine.topology import Direction
from sokoban_engine.undo import MoveRecord, UndoLog


def test_lifo_order():
    log = UndoLog()
    assert not log and log.pop() is None and log.peek() is None
    r1 = MoveRecord(1, "a", Direction.UP)
    r2 = MoveRecord(2, "B", Direction.LEFT)
    log.push(r1)
    log.push(r2)
    assert len(log) == 2
    assert list(log) == [r2, r1]
    assert log.peek() is r2
    assert log.pop() is r2
    assert log.pop() is r1
    assert len(log) == 0


def test_clear():
    log = UndoLog()
    log.push(MoveRecord(0, "c", Direction.DOWN))
    log.clear()
    assert not log
