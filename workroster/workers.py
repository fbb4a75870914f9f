"""Worker kinds held on the roster and the factory that builds them."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum


class Department(IntEnum):
    """Department numbers as stored in the roster file."""

    EMPLOYEE = 1
    MANAGER = 2
    BOSS = 3


@dataclass
class Worker(ABC):
    """A member of staff: an id, a single-word name and a department number."""

    worker_id: int
    name: str
    dept_id: int

    @property
    @abstractmethod
    def title(self) -> str:
        """The post's name."""

    @property
    @abstractmethod
    def duty(self) -> str:
        """What the post is responsible for."""

    def describe(self) -> str:
        """One line with the worker's id, name, post and duty."""
        return (
            f"职工编号:{self.worker_id}"
            f"\t职工姓名:{self.name}"
            f"\t岗位:{self.title}"
            f"\t岗位职责:{self.duty}"
        )


class Employee(Worker):
    """An ordinary employee."""

    title = "普通员工"
    duty = "完成经理交给的任务"


class Manager(Worker):
    """A manager."""

    title = "经理"
    duty = "完成老板交个任务，并且下发任务给普通员工"


class Boss(Worker):
    """The boss."""

    title = "老板"
    duty = "管理公司所有的事物"


_KINDS = {
    Department.EMPLOYEE: Employee,
    Department.MANAGER: Manager,
    Department.BOSS: Boss,
}


def make_worker(worker_id: int, name: str, dept_id: int) -> Worker:
    """Build the worker kind that belongs to ``dept_id``.

    Raises ValueError when ``dept_id`` names no department.
    """
    department = Department(dept_id)
    return _KINDS[department](worker_id, name, int(department))