# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and shares one fork with each neighbour. A monitor watches
how long each philosopher has gone without starting a meal. When one goes
longer than the time to die, it is reported dead, every philosopher is told
to stop, and the simulation ends once all threads have finished.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

All times are in milliseconds. Every argument must be a positive whole number
made only of digits. For example:

```
philo 5 800 200 200
philo 4 410 200 200 7
```

Each state change is printed as one line. The line holds the milliseconds
since the start, the philosopher's number and what happened:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
812 3 died
```

Philosophers start in three staggered groups, half an eating time apart, and
take their forks in an order chosen to avoid a deadlock. A lone philosopher
takes its only fork and waits until it starves.

When a meal count is given, each philosopher stops after eating that many
times. The monitor stops watching as soon as the first philosopher has
finished its meals.

If the number of arguments is wrong, the program prints `Error : Args`. If an
argument is not a valid number, it prints `Error : 404`. In both cases the
exit status is 1; otherwise it is 0.

## Library use

The simulation can also be driven from Python. `parse_args` takes the four
or five arguments without the program name:

```python
import sys
from philosophers.config import parse_args
from philosophers.simulation import run_simulation

settings = parse_args(["4", "410", "200", "200", "3"])
starved = run_simulation(settings, sys.stdout)
```

`run_simulation` returns the index of the philosopher that starved, or `None`
if nobody did. Invalid arguments raise `philosophers.config.ArgumentError`.
The pieces are also available separately: `philosophers.config.Settings`,
`philosophers.simulation.Table` and `Philosopher`, and
`philosophers.reporter.Reporter` with its `Event` values.

The `philosophers.libft` subpackage holds small helpers:

- character classification and case conversion (`chars`)
- decimal text to 32-bit integer and back (`numbers`: `atoi`, `itoa`)
- byte-buffer helpers (`memory`: `memset`, `bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove`)
- string helpers (`strings`: `strlen`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, `strlcpy`, `strlcat`, `strdup`, `strcat`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`, `striteri`)
- stream output (`output`: `putchar_fd`, `putstr_fd`, `putendl_fd`,
  `putnbr_fd`)
- a singly linked list (`linkedlist`: `Node`, `LinkedList`)

## Running the tests

```
pip install .[test]
pytest
```