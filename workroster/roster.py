"""The staff roster and its plain-text file of ``id name dept`` records."""

import re
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .workers import Boss, Department, Employee, Manager, Worker

_INTEGER = re.compile(r"[+-]?\d+")


def format_record(worker: Worker) -> str:
    """The file line for one worker, without the newline.

    Raises ValueError for a name the file could not read back as one word.
    """
    if not worker.name or any(ch.isspace() for ch in worker.name):
        raise ValueError(f"name must be a single word: {worker.name!r}")
    return f"{worker.worker_id} {worker.name} {worker.dept_id}"


def _restore(worker_id: int, name: str, dept_id: int) -> Worker:
    if dept_id == Department.EMPLOYEE:
        return Employee(worker_id, name, dept_id)
    if dept_id == Department.MANAGER:
        return Manager(worker_id, name, dept_id)
    return Boss(worker_id, name, dept_id)


def parse_records(lines: Iterable[str]) -> List[Worker]:
    """Read workers from whitespace-separated ``id name dept`` triples.

    Reading stops at the first triple that is incomplete or whose id or
    department is not an integer. Any department other than employee or
    manager is read as a boss.
    """
    tokens = (token for line in lines for token in line.split())
    workers: List[Worker] = []
    while True:
        chunk = list(islice(tokens, 3))
        if len(chunk) < 3:
            break
        raw_id, name, raw_dept = chunk
        if not (_INTEGER.fullmatch(raw_id) and _INTEGER.fullmatch(raw_dept)):
            break
        workers.append(_restore(int(raw_id), name, int(raw_dept)))
    return workers


class Roster:
    """Workers kept in order and mirrored to a file after every change."""

    def __init__(self, path) -> None:
        self.path = Path(path)
        self._workers: List[Worker] = []
        self.load()

    def load(self) -> int:
        """Replace the roster with the file's records; return how many."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self._workers = []
            return 0
        self._workers = parse_records(text.splitlines())
        return len(self._workers)

    def save(self) -> None:
        """Write every worker to the file, one record per line."""
        content = "".join(format_record(worker) + "\n" for worker in self._workers)
        self.path.write_text(content, encoding="utf-8")

    def add(self, workers: Iterable[Worker]) -> None:
        """Append workers and save.

        Raises ValueError when nothing is given or when an id is already
        on the roster; in that case nothing is added.
        """
        new = list(workers)
        if not new:
            raise ValueError("no workers to add")
        for worker in new:
            if self.index_of(worker.worker_id) is not None:
                raise ValueError(f"worker id {worker.worker_id} already exists")
        self._workers.extend(new)
        self.save()

    def index_of(self, worker_id: int) -> Optional[int]:
        """Position of the first worker with this id, or None."""
        return next(
            (pos for pos, worker in enumerate(self._workers) if worker.worker_id == worker_id),
            None,
        )

    def _require(self, worker_id: int) -> int:
        pos = self.index_of(worker_id)
        if pos is None:
            raise KeyError(worker_id)
        return pos

    def remove(self, worker_id: int) -> Worker:
        """Remove and return the worker with this id, then save.

        Raises KeyError when no worker has the id.
        """
        worker = self._workers.pop(self._require(worker_id))
        self.save()
        return worker

    def replace(self, worker_id: int, worker: Worker) -> None:
        """Put ``worker`` in place of the one with this id, then save.

        Raises KeyError when no worker has the id.
        """
        self._workers[self._require(worker_id)] = worker
        self.save()

    def find_by_name(self, name: str) -> List[Worker]:
        """Every worker with exactly this name, in roster order."""
        return [worker for worker in self._workers if worker.name == name]

    def sort_by_id(self, descending: bool = False) -> None:
        """Order the roster by id, ascending unless ``descending``, then save."""
        self._workers.sort(key=lambda worker: worker.worker_id, reverse=descending)
        self.save()

    def clear(self) -> None:
        """Drop every worker and truncate the file."""
        self._workers = []
        self.path.write_text("", encoding="utf-8")

    def __len__(self) -> int:
        return len(self._workers)

    def __iter__(self) -> Iterator[Worker]:
        return iter(list(self._workers))