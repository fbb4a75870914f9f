"""Random salaries for ten staff members and their grouping into departments."""

import argparse
import random
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List

NAME_SEED = "ABCDEFGHIJ"
LOWEST_SALARY = 10000
HIGHEST_SALARY = 19999


class Division(IntEnum):
    """The three departments staff can be placed in."""

    CEHUA = 0
    MEISHU = 1
    YANFA = 2

    @property
    def label(self) -> str:
        """The department's display name."""
        return _LABELS[self]


_LABELS = {
    Division.CEHUA: "策划部门",
    Division.MEISHU: "美术部门",
    Division.YANFA: "研发部门",
}


@dataclass
class StaffMember:
    """A member of staff and their salary."""

    name: str
    salary: int

    def __str__(self) -> str:
        return f"姓名:{self.name}  工资:{self.salary}"


def create_staff(rng: random.Random) -> List[StaffMember]:
    """Ten staff named 员工A to 员工J with salaries from 10000 to 19999."""
    return [
        StaffMember(f"员工{letter}", rng.randint(LOWEST_SALARY, HIGHEST_SALARY))
        for letter in NAME_SEED
    ]


def assign_departments(
    staff: Iterable[StaffMember], rng: random.Random
) -> Dict[Division, List[StaffMember]]:
    """Place every member in a random division, keeping their original order.

    Every division is a key of the result, even when nobody is placed in it.
    """
    groups: Dict[Division, List[StaffMember]] = {division: [] for division in Division}
    for member in staff:
        groups[Division(rng.randrange(len(Division)))].append(member)
    return groups


def format_groups(groups: Dict[Division, List[StaffMember]]) -> str:
    """Each division's name followed by its members, divisions in number order."""
    lines: List[str] = []
    for division in Division:
        lines.append(f"{division.label}:")
        lines.extend(str(member) for member in groups.get(division, []))
    return "\n".join(lines)


def main(argv=None) -> int:
    """Create the staff, list them and show them grouped by department."""
    parser = argparse.ArgumentParser(description="Group staff into departments.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    staff = create_staff(rng)
    print("员工信息如下：")
    for member in staff:
        print(member)
    print(format_groups(assign_departments(staff, rng)))
    return 0


if __name__ == "__main__":
    sys.exit(main())