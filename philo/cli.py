"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philo.args import ArgumentError, parse_settings
from philo.simulation import Simulation, run_lone_philosopher


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments and return an exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except ArgumentError as error:
        print(error, file=sys.stdout)
        return 1
    if settings.philo_count == 1:
        run_lone_philosopher(settings, sys.stdout)
        return 0
    try:
        Simulation(settings, sys.stdout).run()
    except RuntimeError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())