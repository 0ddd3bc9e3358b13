# controller.py
from __future__ import annotations

import math
import time

from config import ControllerConfig, ConfigError, DIRECTION_NAMES, ALTERNATING_ORDER
from density import FixedDensity, validate_density
from display import format_event, print_cycle_header
from models import TrafficLight, SignalEvent, RED, GREEN, YELLOW, ALL_RED, ALL_DIRECTIONS
from pacing import make_pacer


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (shares are never negative)."""
    return int(math.floor(value + 0.5))


def allocate_green(first_density, second_density, min_green: int, max_green: int) -> tuple[int, int]:
    """
    Splits the green budget between two conflicting directions.

    Each direction gets ``min_green`` plus its share of the extra budget
    (``max_green - min_green``) in proportion to its density. With no traffic
    at all both directions fall back to ``min_green``. Results are clamped to
    [min_green, max_green] so rounding can never overshoot.
    """
    first_density = validate_density(first_density)
    second_density = validate_density(second_density)
    total = first_density + second_density
    if total == 0:
        return min_green, min_green

    extra_budget = max_green - min_green
    first_green = min_green + round_half_up((first_density / total) * extra_budget)
    second_green = min_green + round_half_up((second_density / total) * extra_budget)

    first_green = max(min_green, min(max_green, first_green))
    second_green = max(min_green, min(max_green, second_green))
    return first_green, second_green


class IntersectionController:
    """
    Two-phase controller for a single intersection.

    Owns one light per conflicting direction. Every cycle it re-allocates the
    green times from that cycle's densities and then drives both lights
    through GREEN -> YELLOW -> RED, with an all-red gap after each direction.
    Every transition is recorded as a SignalEvent and printed.
    """

    def __init__(self, config: ControllerConfig | None = None, pacer=None, names=DIRECTION_NAMES):
        self.config = config or ControllerConfig()
        self.pacer = pacer or make_pacer(self.config.realtime)
        if self.pacer.realtime != self.config.realtime:
            raise ConfigError(
                f"{type(self.pacer).__name__} does not match realtime={self.config.realtime} in the config"
            )
        self.env = self.pacer.create_environment()

        if len(names) != 2 or names[0] == names[1]:
            raise ConfigError(f"Need two distinct direction names, got {names!r}")
        self.first = TrafficLight(names[0], self.config.min_green, self.config.yellow_time)
        self.second = TrafficLight(names[1], self.config.min_green, self.config.yellow_time)

        self.events: list[SignalEvent] = []
        self.cycles_run = 0
        self.green_totals = {names[0]: 0, names[1]: 0}

    @property
    def lights(self) -> tuple[TrafficLight, TrafficLight]:
        return self.first, self.second

    def allocate(self, first_density, second_density) -> tuple[int, int]:
        return allocate_green(first_density, second_density, self.config.min_green, self.config.max_green)

    def compute_and_set_green(self, first_density, second_density):
        first_green, second_green = self.allocate(first_density, second_density)
        self.first.green_duration = first_green
        self.second.green_duration = second_green

        # Each light waits red through the other's green and yellow plus both gaps.
        gaps = 2 * self.config.all_red_time
        for light, other in ((self.first, self.second), (self.second, self.first)):
            light.yellow_duration = self.config.yellow_time
            light.red_duration = other.green_duration + self.config.yellow_time + gaps
        return first_green, second_green

    def serving_order(self, cycle: int) -> tuple[TrafficLight, TrafficLight]:
        if self.config.serving_order == ALTERNATING_ORDER and cycle % 2 == 0:
            return self.second, self.first
        return self.first, self.second

    def _record(self, cycle, direction, state, duration):
        event = SignalEvent(
            time=self.env.now,
            clock=time.strftime("%H:%M:%S"),
            cycle=cycle,
            direction=direction,
            state=state,
            duration=duration,
        )
        self.events.append(event)
        print(format_event(event))
        return event

    def change_light(self, light: TrafficLight, state: str, cycle: int):
        light.set_state(state)
        return self._record(cycle, light.name, state, light.hold_time())

    def run_phase(self, first: TrafficLight, second: TrafficLight, cycle: int):
        """
        SimPy process for one full cycle: the first direction's phase, an
        all-red gap, the second direction's phase, another all-red gap.
        """
        for light in (first, second):
            self.change_light(light, GREEN, cycle)
            yield from self.pacer.hold(self.env, light.green_duration)

            self.change_light(light, YELLOW, cycle)
            yield from self.pacer.hold(self.env, light.yellow_duration)

            self.change_light(light, RED, cycle)
            self._record(cycle, ALL_DIRECTIONS, ALL_RED, self.config.all_red_time)
            yield from self.pacer.hold(self.env, self.config.all_red_time)

    def run_cycle(self, cycle: int, first_density, second_density):
        first_green, second_green = self.compute_and_set_green(first_density, second_density)
        print_cycle_header(
            cycle,
            {self.first.name: first_density, self.second.name: second_density},
            {self.first.name: first_green, self.second.name: second_green},
        )
        first, second = self.serving_order(cycle)
        self.env.run(until=self.env.process(self.run_phase(first, second, cycle)))

        self.cycles_run += 1
        for light in self.lights:
            self.green_totals[light.name] += light.green_duration

    def simulate(self, source, cycles: int | None = None) -> list[SignalEvent]:
        """
        Runs ``cycles`` cycles (the configured count by default), asking
        ``source`` for each cycle's densities. Cycle numbers keep counting
        across repeated calls; the source sees 1..cycles for this run.
        """
        cycles = self.config.cycles if cycles is None else cycles
        self.pacer.start(self.env)
        for index in range(1, cycles + 1):
            first_density, second_density = source.next_pair(index)
            self.run_cycle(self.cycles_run + 1, first_density, second_density)
        return self.events

    def simulate_with_inputs(self, first_density, second_density) -> list[SignalEvent]:
        return self.simulate(FixedDensity(first_density, second_density))

    def get_statistics(self) -> dict:
        cycles = self.cycles_run
        return {
            "cycles": cycles,
            "sim_time": self.env.now,
            "events": len(self.events),
            "green_totals": dict(self.green_totals),
            "avg_green": {
                name: (total / cycles if cycles else 0)
                for name, total in self.green_totals.items()
            },
        }
