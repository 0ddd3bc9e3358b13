# display.py
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches

from models import RED, GREEN, YELLOW, ALL_RED, ALL_DIRECTIONS

STATE_COLOURS = {RED: "red", GREEN: "green", YELLOW: "gold"}


def print_banner():
    print("Adaptive Traffic Light Simulator")
    print("--------------------------------")


def format_event(event):
    """
    One console line per transition, e.g.
    ``[08:15:02] North-South -> GREEN (will last 31s)``.
    """
    if event.state == ALL_RED:
        return f"[{event.clock}] {ALL_DIRECTIONS} -> RED (all-red gap {event.duration}s)"
    if event.duration is None:
        return f"[{event.clock}] {event.direction} -> {event.state} (will last until other gets green)"
    return f"[{event.clock}] {event.direction} -> {event.state} (will last {event.duration}s)"


def print_cycle_header(cycle, densities, greens):
    print(f"\n=== Cycle {cycle} ===")
    print("Densities: " + "  ".join(f"{name}={value}" for name, value in densities.items()))
    print("Green:     " + "  ".join(f"{name}={value}s" for name, value in greens.items()))


def display_statistics(stats):
    print("\nSimulation Statistics:")
    print("----------------------")
    print("Cycles Run:", stats["cycles"])
    print("Simulated Time (s):", stats["sim_time"])
    print("Transitions Recorded:", stats["events"])
    for name, total in stats["green_totals"].items():
        print(f"{name}: total green {total}s, average green {stats['avg_green'][name]:.1f}s per cycle")


def build_timeline(events, end_time=None):
    """
    Turns the event log into coloured spans per direction.
    Returns {direction: [(start, width, state), ...]} in the order directions
    first appear. Lights are RED until their first recorded change.
    """
    light_events = [e for e in events if e.state != ALL_RED]
    if not light_events:
        return {}
    start = events[0].time
    end = events[-1].time if end_time is None else end_time

    timeline = {}
    current = {}
    for event in light_events:
        since, state = current.get(event.direction, (start, RED))
        spans = timeline.setdefault(event.direction, [])
        if event.time > since:
            spans.append((since, event.time - since, state))
        current[event.direction] = (event.time, event.state)
    for direction, (since, state) in current.items():
        if end > since:
            timeline[direction].append((since, end - since, state))
    return timeline


def plot_timeline(events, end_time=None, save_to_file=None):
    timeline = build_timeline(events, end_time)
    fig, ax = plt.subplots(figsize=(10, 1 + 1.2 * max(len(timeline), 1)))

    for row, (direction, spans) in enumerate(timeline.items()):
        ax.broken_barh(
            [(start, width) for start, width, _ in spans],
            (row * 10, 8),
            facecolors=[STATE_COLOURS[state] for _, _, state in spans],
        )
    ax.set_yticks([row * 10 + 4 for row in range(len(timeline))])
    ax.set_yticklabels(list(timeline))
    ax.set_xlabel("Simulation time (s)")
    ax.set_title("Signal timeline")

    handles = [mpatches.Patch(color=colour, label=f"{state} Light") for state, colour in STATE_COLOURS.items()]
    ax.legend(handles=handles, loc="upper right", fontsize="small")

    if save_to_file:
        fig.savefig(save_to_file)
        plt.close(fig)
        print(f"Timeline saved to {save_to_file}")
    else:
        plt.show()
    return timeline
