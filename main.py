# main.py
import sys

from config import ControllerConfig, ConfigError, EVENTS_CSV, TIMELINE_FILE
from controller import IntersectionController
from density import FixedDensity, RandomDensity, ScriptedDensity, DensityError
from display import print_banner, display_statistics, plot_timeline
from records import export_events_csv, import_densities_csv


def ask_int(prompt):
    return int(input(prompt).strip())


def choose_source(mode, controller):
    """
    Builds the density source for the chosen input mode.
    Raises DensityError for anything the user typed or supplied that is unusable.
    """
    if mode == "1":
        try:
            first = ask_int(f"Enter {controller.first.name} traffic density (non-negative integer): ")
            second = ask_int(f"Enter {controller.second.name} traffic density (non-negative integer): ")
        except (ValueError, EOFError):
            raise DensityError("densities must be whole numbers.")
        return FixedDensity(first, second)
    if mode == "3":
        try:
            filename = input("Enter densities CSV file (columns first_density, second_density): ").strip()
            pairs = import_densities_csv(filename)
        except EOFError:
            raise DensityError("no densities file given.")
        except OSError as e:
            raise DensityError(f"cannot read densities file: {e}")
        except KeyError as e:
            raise DensityError(f"densities file is missing column {e}")
        except ValueError:
            raise DensityError("densities file must contain whole numbers.")
        return ScriptedDensity(pairs)
    return RandomDensity()


def main():
    print_banner()
    try:
        cycles = ask_int("Enter number of cycles to simulate (e.g., 3): ")
    except (ValueError, EOFError):
        return 0

    print("Choose input mode:")
    print("  1 - Manual densities")
    print("  2 - Random densities")
    print("  3 - Densities from CSV file")
    try:
        mode = input("Enter 1, 2 or 3: ").strip()
        realtime = input("Run in real-time (sleep between phases)? 1=Yes 0=No (choose 0 for fast output): ").strip() == "1"
    except EOFError:
        return 0

    try:
        config = ControllerConfig(cycles=cycles, realtime=realtime)
        controller = IntersectionController(config)
        source = choose_source(mode, controller)
        controller.simulate(source)
    except (ConfigError, DensityError) as e:
        print(f"Invalid input: {e}")
        return 1

    display_statistics(controller.get_statistics())

    try:
        save = input("Save event log and timeline? (y/n): ").strip().lower() == "y"
    except EOFError:
        save = False
    if save:
        export_events_csv(controller.events, EVENTS_CSV)
        print(f"Event log saved to {EVENTS_CSV}")
        plot_timeline(controller.events, end_time=controller.env.now, save_to_file=TIMELINE_FILE)

    print("\nSimulation finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
