"""Interactive menu for managing the staff roster."""

import argparse
import sys
from collections import deque
from typing import Callable, Dict, List, Optional, TextIO

from .roster import Roster
from .workers import Department, Worker, make_worker

DEFAULT_FILE = "test.txt"

_MENU = (
    "*****************************",
    "*****欢迎使用职工管理系统*****",
    "*******0-退出管理程序*********",
    "*******1-增加职工信息*********",
    "*******2-显示职工信息*********",
    "*******3-删除离职职工*********",
    "*******4-修改职工信息*********",
    "*******5-查找职工信息*********",
    "*******6-按照编号排序*********",
    "*******7-清空所有文档*********",
    "*****************************",
)

_DEPARTMENT_CHOICES = ("1.普通职工", "2.经理", "3.老板")


class _Tokens:
    """Whitespace-separated words read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque = deque()

    def next(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        return self._pending.popleft()


def _as_int(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None


class RosterConsole:
    """Reads menu choices from ``stdin`` and acts on a roster."""

    def __init__(self, roster: Roster, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None) -> None:
        self.roster = roster
        self._tokens = _Tokens(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self._actions: Dict[int, Callable[[], None]] = {
            1: self._add,
            2: self._show,
            3: self._delete,
            4: self._modify,
            5: self._find,
            6: self._sort,
            7: self._clean,
        }

    def run(self) -> None:
        """Serve menu choices until the user exits or input runs out."""
        try:
            while True:
                self._say(*_MENU)
                self._say("请输入你的选择")
                choice = _as_int(self._tokens.next())
                if choice == 0:
                    self._say("欢迎下次使用")
                    return
                action = self._actions.get(choice)
                if action is not None:
                    action()
        except EOFError:
            return

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self._out)

    def _ask_int(self) -> int:
        while True:
            value = _as_int(self._tokens.next())
            if value is not None:
                return value
            self._say("输入有误")

    def _ask_department(self) -> Department:
        while True:
            self._say(*_DEPARTMENT_CHOICES)
            value = _as_int(self._tokens.next())
            try:
                return Department(value)
            except ValueError:
                self._say("输入有误")

    def _is_empty(self) -> bool:
        return len(self.roster) == 0

    def _add(self) -> None:
        self._say("请输入添加职工的数量")
        count = _as_int(self._tokens.next())
        if count is None or count <= 0:
            self._say("输入有误")
            return
        new: List[Worker] = []
        for number in range(1, count + 1):
            self._say(f"请输入第{number}个新职工的编号")
            while True:
                worker_id = self._ask_int()
                if self.roster.index_of(worker_id) is None:
                    break
                self._say("此编号已存在!请重新输入")
            self._say(f"请输入第{number}个新职工的姓名")
            name = self._tokens.next()
            self._say("请选择该职工的岗位")
            department = self._ask_department()
            new.append(make_worker(worker_id, name, department))
        self.roster.add(new)
        self._say(f"成功添加{count}个新职工")

    def _show(self) -> None:
        if self._is_empty():
            self._say("文件为空或记录为空")
            return
        for worker in self.roster:
            self._say(worker.describe())

    def _delete(self) -> None:
        if self._is_empty():
            self._say("文件不存在或者记录为空")
            return
        self._say("请输入要删除职工的编号")
        worker_id = self._ask_int()
        try:
            self.roster.remove(worker_id)
        except KeyError:
            self._say("删除失败，未找到该员工")
        else:
            self._say("删除成功")

    def _modify(self) -> None:
        if self._is_empty():
            self._say("文件不存在或记录为空")
            return
        self._say("请输入要修改的职工编号")
        worker_id = self._ask_int()
        if self.roster.index_of(worker_id) is None:
            self._say("修改失败，查无此人。")
            return
        self._say(f"查找到了编号为{worker_id}的这个职工,请输入新的职工号")
        new_id = self._ask_int()
        self._say("请输入新的姓名")
        new_name = self._tokens.next()
        self._say("请输入新的岗位")
        department = self._ask_department()
        self.roster.replace(worker_id, make_worker(new_id, new_name, department))
        self._say("修改成功!")

    def _find(self) -> None:
        if self._is_empty():
            self._say("文件不存在或记录为空")
            return
        self._say("请输入查找的方式", "1.按职工编号查找", "2.按职工姓名查找")
        select = _as_int(self._tokens.next())
        if select == 1:
            self._say("请输入查找的职工编号")
            worker_id = self._ask_int()
            pos = self.roster.index_of(worker_id)
            if pos is None:
                self._say("查找失败，查无此人!")
            else:
                worker = list(self.roster)[pos]
                self._say("查找成功！该职工的信息如下:", worker.describe())
        elif select == 2:
            self._say("请输入要查找的姓名")
            name = self._tokens.next()
            matches = self.roster.find_by_name(name)
            for worker in matches:
                self._say(
                    f"查找成功,职工编号为{worker.worker_id}的职工，他的信息如下:",
                    worker.describe(),
                )
            if not matches:
                self._say("查找失败，查无此人")
        else:
            self._say("输入选项有误")

    def _sort(self) -> None:
        if self._is_empty():
            self._say("文件不存在或记录为空")
            return
        self._say("请选择排序方式", "1.按照职工号进行升序", "2.按照职工号进行降序")
        select = _as_int(self._tokens.next())
        self.roster.sort_by_id(descending=select != 1)
        self._say("排序成功！排序后的结果为:")
        self._show()

    def _clean(self) -> None:
        self._say("确认清空吗?", "1.确认", "2.取消")
        if _as_int(self._tokens.next()) == 1:
            self.roster.clear()
            self._say("清空成功！")


def main(argv=None) -> int:
    """Run the roster menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Manage the staff roster.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="roster file")
    args = parser.parse_args(argv)
    RosterConsole(Roster(args.file), sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())