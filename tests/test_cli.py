import io
import sys

from workroster.cli import RosterConsole, main
from workroster.roster import Roster
from workroster.workers import make_worker


def run_console(tmp_path, script, records=None):
    path = tmp_path / "test.txt"
    if records is not None:
        path.write_text(records, encoding="utf-8")
    roster = Roster(path)
    out = io.StringIO()
    RosterConsole(roster, io.StringIO(script), out).run()
    return roster, out.getvalue(), path


def test_exit_says_goodbye(tmp_path):
    _, out, _ = run_console(tmp_path, "0\n")
    assert "欢迎下次使用" in out
    assert "欢迎使用职工管理系统" in out


def test_end_of_input_stops(tmp_path):
    roster, out, _ = run_console(tmp_path, "")
    assert "请输入你的选择" in out
    assert len(roster) == 0


def test_add_workers_saves_file(tmp_path):
    roster, out, path = run_console(tmp_path, "1\n2\n1 Tom 1\n2 Ann 3\n0\n")
    assert "成功添加2个新职工" in out
    assert path.read_text(encoding="utf-8") == "1 Tom 1\n2 Ann 3\n"
    assert [w.worker_id for w in roster] == [1, 2]


def test_add_rejects_existing_id(tmp_path):
    roster, out, _ = run_console(tmp_path, "1\n1\n1\n5 Bob 2\n0\n", records="1 Tom 1\n")
    assert "此编号已存在!请重新输入" in out
    assert [w.worker_id for w in roster] == [1, 5]


def test_add_reprompts_bad_department(tmp_path):
    roster, out, _ = run_console(tmp_path, "1\n1\n4 Kim 9 2\n0\n")
    assert "输入有误" in out
    assert [w.dept_id for w in roster] == [2]


def test_add_bad_count(tmp_path):
    roster, out, _ = run_console(tmp_path, "1\n0\n0\n")
    assert "输入有误" in out
    assert len(roster) == 0


def test_show_empty(tmp_path):
    _, out, _ = run_console(tmp_path, "2\n0\n")
    assert "文件为空或记录为空" in out


def test_show_lists_workers(tmp_path):
    _, out, _ = run_console(tmp_path, "2\n0\n", records="1 Tom 1\n2 Ann 3\n")
    assert make_worker(1, "Tom", 1).describe() in out
    assert make_worker(2, "Ann", 3).describe() in out


def test_delete_worker(tmp_path):
    roster, out, path = run_console(tmp_path, "3\n1\n0\n", records="1 Tom 1\n2 Ann 3\n")
    assert "删除成功" in out
    assert path.read_text(encoding="utf-8") == "2 Ann 3\n"
    assert len(roster) == 1


def test_delete_missing(tmp_path):
    roster, out, _ = run_console(tmp_path, "3\n9\n0\n", records="1 Tom 1\n")
    assert "删除失败，未找到该员工" in out
    assert len(roster) == 1


def test_delete_on_empty(tmp_path):
    _, out, _ = run_console(tmp_path, "3\n0\n")
    assert "文件不存在或者记录为空" in out


def test_modify_worker(tmp_path):
    _, out, path = run_console(tmp_path, "4\n1\n7 Jim 2\n0\n", records="1 Tom 1\n")
    assert "修改成功!" in out
    assert path.read_text(encoding="utf-8") == "7 Jim 2\n"


def test_modify_missing(tmp_path):
    _, out, path = run_console(tmp_path, "4\n3\n0\n", records="1 Tom 1\n")
    assert "修改失败，查无此人。" in out
    assert path.read_text(encoding="utf-8") == "1 Tom 1\n"


def test_find_by_id(tmp_path):
    _, out, _ = run_console(tmp_path, "5\n1\n2\n0\n", records="1 Tom 1\n2 Ann 3\n")
    assert "查找成功！该职工的信息如下:" in out
    assert make_worker(2, "Ann", 3).describe() in out


def test_find_by_id_missing(tmp_path):
    _, out, _ = run_console(tmp_path, "5\n1\n8\n0\n", records="1 Tom 1\n")
    assert "查找失败，查无此人!" in out


def test_find_by_name(tmp_path):
    _, out, _ = run_console(tmp_path, "5\n2\nTom\n0\n", records="1 Tom 1\n2 Ann 3\n")
    assert "查找成功,职工编号为1的职工，他的信息如下:" in out
    assert make_worker(2, "Ann", 3).describe() not in out


def test_find_by_name_missing(tmp_path):
    _, out, _ = run_console(tmp_path, "5\n2\nZed\n0\n", records="1 Tom 1\n")
    assert "查找失败，查无此人" in out


def test_find_bad_option(tmp_path):
    _, out, _ = run_console(tmp_path, "5\n3\n0\n", records="1 Tom 1\n")
    assert "输入选项有误" in out


def test_sort_descending(tmp_path):
    roster, out, path = run_console(tmp_path, "6\n2\n0\n", records="1 A 1\n3 B 2\n2 C 3\n")
    assert "排序成功！排序后的结果为:" in out
    assert [w.worker_id for w in roster] == [3, 2, 1]
    assert path.read_text(encoding="utf-8") == "3 B 2\n2 C 3\n1 A 1\n"


def test_sort_ascending(tmp_path):
    roster, _, _ = run_console(tmp_path, "6\n1\n0\n", records="3 B 2\n1 A 1\n2 C 3\n")
    assert [w.worker_id for w in roster] == [1, 2, 3]


def test_clean_confirmed(tmp_path):
    roster, out, path = run_console(tmp_path, "7\n1\n0\n", records="1 Tom 1\n")
    assert "清空成功！" in out
    assert path.read_text(encoding="utf-8") == ""
    assert len(roster) == 0


def test_clean_cancelled(tmp_path):
    roster, out, _ = run_console(tmp_path, "7\n2\n0\n", records="1 Tom 1\n")
    assert "清空成功！" not in out
    assert len(roster) == 1


def test_main_uses_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "staff.txt"
    path.write_text("1 Tom 1\n", encoding="utf-8")
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n0\n"))
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert make_worker(1, "Tom", 1).describe() in out