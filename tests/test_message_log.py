import pytest

from roguelike.engine.messages import DEFAULT_MESSAGE_COLOR, MessageLog


def test_add_and_recent():
    log = MessageLog(capacity=10)
    log.add(1, "first")
    log.add(2, "second", (255, 0, 0))
    assert len(log) == 2
    assert log.recent_text(1) == ("second",)
    assert log.messages()[0].color == DEFAULT_MESSAGE_COLOR
    assert log.messages()[1].color == (255, 0, 0)
    assert log.get_recent(0) == []


def test_capacity_drops_oldest():
    log = MessageLog(capacity=3)
    for i in range(5):
        log.add(i, f"msg {i}")
    assert [m.text for m in log.messages()] == ["msg 2", "msg 3", "msg 4"]
    log.clear()
    assert len(log) == 0


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        MessageLog(capacity=0)
