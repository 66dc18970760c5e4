from taskorder.models import TaskTable


def test_task_table_built_from_names():
    tasks = TaskTable(names=["A", "B"])
    assert "B" in tasks
    assert tasks.id_of("B") == 1
    assert tasks.intern("C") == (2, True)
    assert tasks.intern("A") == (0, False)
