import pytest

from models import TrafficLight, SignalEvent, LIGHT_CYCLE, RED, GREEN, YELLOW


def test_light_cycle_graph():
    assert set(LIGHT_CYCLE.edges) == {(RED, GREEN), (GREEN, YELLOW), (YELLOW, RED)}


def test_light_walks_through_cycle():
    light = TrafficLight("North-South", green_duration=12, yellow_duration=3)
    assert light.state == RED
    assert light.hold_time() is None

    light.set_state(GREEN)
    assert light.hold_time() == 12
    light.set_state(YELLOW)
    assert light.hold_time() == 3
    light.set_state(RED)
    assert light.state == RED


def test_light_cannot_skip_green():
    light = TrafficLight("East-West")
    with pytest.raises(ValueError):
        light.set_state(YELLOW)
    assert light.state == RED


def test_event_row_leaves_red_duration_blank():
    event = SignalEvent(time=13, clock="10:00:00", cycle=1, direction="North-South", state=RED, duration=None)
    assert event.as_row()["duration"] == ""
    assert event.as_row()["direction"] == "North-South"
