from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

RED = "RED"
GREEN = "GREEN"
YELLOW = "YELLOW"
ALL_RED = "ALL_RED"  # Event marker: both directions held red together.

ALL_DIRECTIONS = "All directions"


def build_light_cycle() -> nx.DiGraph:
    """
    Directed graph of the colours a single light may move between.
    A light only ever travels RED -> GREEN -> YELLOW -> RED.
    """
    G = nx.DiGraph()
    nx.add_cycle(G, [RED, GREEN, YELLOW])
    return G


LIGHT_CYCLE = build_light_cycle()


class TrafficLight:
    def __init__(self, name: str, green_duration: int = 10, yellow_duration: int = 3):
        self.name = name
        self.state = RED
        self.green_duration = green_duration
        self.yellow_duration = yellow_duration
        self.red_duration = 0  # Filled in by the controller each cycle.

    def set_state(self, state: str):
        if not LIGHT_CYCLE.has_edge(self.state, state):
            raise ValueError(f"{self.name} cannot change from {self.state} to {state}")
        self.state = state

    def hold_time(self) -> int | None:
        """
        Planned hold for the current colour. RED has no fixed hold of its own:
        it lasts until the conflicting direction has had its green.
        """
        if self.state == GREEN:
            return self.green_duration
        if self.state == YELLOW:
            return self.yellow_duration
        return None

    def __repr__(self):
        return f"TrafficLight({self.name!r}, state={self.state}, green={self.green_duration})"


@dataclass(frozen=True)
class SignalEvent:
    time: float          # Simulation seconds since the controller started.
    clock: str           # Wall-clock HH:MM:SS when the change was made.
    cycle: int
    direction: str
    state: str
    duration: int | None

    def as_row(self) -> dict:
        return {
            "cycle": self.cycle,
            "time": self.time,
            "clock": self.clock,
            "direction": self.direction,
            "state": self.state,
            "duration": "" if self.duration is None else self.duration,
        }
