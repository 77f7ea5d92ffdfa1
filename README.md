# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread, picks up the two forks beside it, eats, sleeps and thinks,
while a monitor watches for anyone who has gone too long without a meal.

## Installing

    pip install .

## Running

    philo <number_of_philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [number_of_times_each_must_eat]

The same entry point can be started with `python -m philo.cli`.

All times are in milliseconds, and every argument must be a positive whole
number (an optional leading `+` is accepted). For example:

    philo 5 800 200 200
    philo 4 410 200 200 7

Each state change is printed on its own line as

    <milliseconds since start> <philosopher number> <state>

where the state is one of `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` or `died`. The simulation ends when a philosopher dies, or,
when the fifth argument is given, once every philosopher has eaten at least
that many times. After it ends, only the `died` line is still printed.

With an odd number of philosophers, the first three share three forks in a
ring and take turns eating one after another; everyone else sits in pairs.

A single philosopher takes the one fork on the table, waits out
`time_to_die`, and the line `is dead` is printed.

Wrong arguments print an error message (with a usage line when the count
of arguments is wrong) to standard output, and the command exits with
status 1.

## Using it from Python

    import sys
    from philo.args import parse_settings
    from philo.simulation import Simulation

    settings = parse_settings(["5", "800", "200", "200", "3"])
    casualty = Simulation(settings, sys.stdout).run()

- `philo.args.parse_settings(args)` takes the arguments without the program
  name, validates them and returns a `Settings` dataclass; bad input raises
  `ArgumentError`. `check_args`, `is_number` and `parse_int` are the
  individual checks.
- `philo.simulation.Simulation.run()` starts the philosophers, monitors
  them, waits for every thread, and returns the `Philosopher` who died, or
  `None` when the meal target was reached. `Simulation` needs at least two
  philosophers; `run_lone_philosopher(settings, out)` plays out the
  one-philosopher table.
- `philo.seating.assign_forks(count)` gives the `(left, right)` fork indices
  each philosopher uses for a table of `count` seats.
- `philo.timing` holds the millisecond clock `now_ms`, the step-wise
  `precise_sleep`, and `is_critical_time`, which decides whether the monitor
  polls without pausing.

## Tests

    pip install ".[test]"
    pytest