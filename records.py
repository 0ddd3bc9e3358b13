# records.py
import csv

from config import EVENTS_CSV

EVENT_FIELDS = ["cycle", "time", "clock", "direction", "state", "duration"]


def export_events_csv(events, filename=EVENTS_CSV):
    """
    Exports the signal event log to a CSV file, one transition per row.
    RED transitions have an empty duration.
    """
    with open(filename, "w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=EVENT_FIELDS)
        writer.writeheader()
        for event in events:
            writer.writerow(event.as_row())
    return filename


def import_densities_csv(filename):
    """
    Imports per-cycle densities from a CSV file.
    The CSV file is expected to have columns: first_density, second_density.
    Returns a list of (first, second) integer pairs in file order.
    """
    pairs = []
    with open(filename, "r") as csvfile:
        reader = csv.DictReader(csvfile)
        for row in reader:
            pairs.append((int(row["first_density"]), int(row["second_density"])))
    return pairs
