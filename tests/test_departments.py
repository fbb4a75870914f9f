import random

from workroster.departments import (
    Division,
    StaffMember,
    assign_departments,
    create_staff,
    format_groups,
    main,
)


def test_create_staff_names_follow_seed_letters():
    staff = create_staff(random.Random(1))
    assert [member.name for member in staff] == ["员工" + c for c in "ABCDEFGHIJ"]


def test_create_staff_salaries_in_range():
    for seed in range(20):
        for member in create_staff(random.Random(seed)):
            assert 10000 <= member.salary <= 19999


def test_create_staff_is_reproducible_with_seed():
    first = create_staff(random.Random(7))
    second = create_staff(random.Random(7))
    assert len(first) == 10
    assert [m.name for m in first] == ["员工" + c for c in "ABCDEFGHIJ"]
    assert [m.salary for m in first] == [m.salary for m in second]
    assert first == second


def test_assign_departments_places_everyone_once():
    staff = create_staff(random.Random(3))
    groups = assign_departments(staff, random.Random(3))
    assert set(groups) == set(Division)
    placed = [m.name for members in groups.values() for m in members]
    assert sorted(placed) == sorted(m.name for m in staff)


def test_assign_departments_keeps_original_order_within_group():
    staff = create_staff(random.Random(5))
    order = {m.name: pos for pos, m in enumerate(staff)}
    groups = assign_departments(staff, random.Random(11))
    for members in groups.values():
        positions = [order[m.name] for m in members]
        assert positions == sorted(positions)


def test_division_labels():
    assert format_groups({}).splitlines() == ["策划部门:", "美术部门:", "研发部门:"]
    assert [d.label for d in Division] == ["策划部门", "美术部门", "研发部门"]


def test_format_groups_lists_headers_in_order():
    member = StaffMember("员工A", 12345)
    text = format_groups({Division.MEISHU: [member]})
    assert text.splitlines() == [
        "策划部门:",
        "美术部门:",
        "姓名:员工A  工资:12345",
        "研发部门:",
    ]


def test_main_prints_staff_and_groups(capsys):
    assert main(["--seed", "4"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("员工信息如下：")
    for label in ("策划部门:", "美术部门:", "研发部门:"):
        assert label in out
    assert out.count("员工J") == 2