# workroster

A staff roster kept in a plain text file and managed from a numbered console
menu, two small random demos (a judged contest and a department draw), and a
handful of container and helper types. Prompts and output are in Chinese.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The roster console

```
workroster [--file PATH]
```

starts an interactive menu working on the roster file `PATH` (default
`test.txt` in the current directory):

| Choice | Action                                   |
|--------|------------------------------------------|
| 0      | leave the program                        |
| 1      | add staff                                |
| 2      | show all staff                           |
| 3      | remove a member by id                    |
| 4      | replace a member's record                |
| 5      | find a member by id or by name           |
| 6      | sort by id, ascending (1) or descending  |
| 7      | clear the whole roster                   |

Any other choice simply shows the menu again. The program also ends when
standard input runs out. An id that is already on the roster, a non-numeric
id, or a post other than 1, 2 or 3 is asked for again.

Every change is written straight back to the roster file. Each line of the file
holds one person as `id name department`, separated by spaces, where the
department is `1` for an employee, `2` for a manager and `3` for the boss.
Names are single words. When the file is read, reading stops at the first
incomplete or non-numeric record, and any department other than 1 or 2 is
read as the boss.

## Using the roster from Python

```python
from workroster.roster import Roster
from workroster.workers import make_worker

roster = Roster("staff.txt")          # loads the file if it exists
roster.add([make_worker(7, "Alice", 2)])
roster.sort_by_id(descending=False)

for worker in roster:
    print(worker.describe())
```

- `workroster.workers` – `Department` (`EMPLOYEE`, `MANAGER`, `BOSS`), the
  abstract `Worker` with its `Employee`, `Manager` and `Boss` kinds, and
  `make_worker`, which raises `ValueError` for an unknown department.
- `workroster.roster.Roster` – `load`, `save`, `add` (raises `ValueError` for
  an empty batch or an id already on the roster), `index_of`, `remove` and
  `replace` (both raise `KeyError` for an unknown id), `find_by_name`,
  `sort_by_id` and `clear`. Every change saves the file.
  `format_record` and `parse_records` convert between workers and file lines.
- `workroster.cli.RosterConsole` – the menu itself, reading from and writing
  to any text streams.

## Other commands

```
workroster-contest [--seed N]
```

creates five contestants, 选手A to 选手E, has ten judges mark each one from 60
to 100, drops one highest and one lowest mark and prints the integer mean of
the rest. The functions `create_contestants`, `judge`, `trimmed_mean` and
`score_contestants` live in `workroster.contest`.

```
workroster-departments [--seed N]
```

creates ten staff members, 员工A to 员工J, with random salaries from 10000 to
19999, places each in a random `Division` and prints them grouped by division.
The functions `create_staff`, `assign_departments` and `format_groups` live in
`workroster.departments`.

`--seed` makes a run repeatable.

## Helpers

- `workroster.fixed_array.FixedArray` – an array with a fixed capacity;
  `push_back` returns `False` and changes nothing when full, `pop_back`
  returns `None` when empty, and `copy` gives an independent copy.
- `workroster.ordered` – `SortedMap` (key order, optionally reversed),
  `UniqueSet` (ordered by an optional key, refusing equivalent values) and
  `MultiSet` (ascending, duplicates allowed).
- `workroster.functors` – `Adder`, `CountingPrinter`, `greater_than_five`,
  `find_first`, `sort_descending` and `print_with`.
- `workroster.operators` – `Pair` (added to a `Pair` or an `int`), `Counter`
  with `increment` and `post_increment`, `Person`, and `AgeAccumulator` with a
  chainable `add`.
- `workroster.templates` – `swap`, `selection_sort_desc`, `add_ints` (a
  single character counts as its code point), `values_equal` and `Member`.