from pathlib import Path

import pytest

from taskorder.loader import TaskFileError, load_tasks, parse_lines


def test_parse_assigns_ids_on_first_sight():
    graph, tasks = parse_lines(["A\tB\tC", "B\tC", "D"])
    assert tasks.names == ["A", "B", "C", "D"]
    assert graph.count_vertices() == 4
    # prerequisite -> dependent
    assert graph.get_adjacency_list(tasks.id_of("B")) == [tasks.id_of("A")]
    assert graph.get_adjacency_list(tasks.id_of("C")) == [tasks.id_of("A"), tasks.id_of("B")]
    assert graph.count_edges() == 3
    assert all(e.weight == 1.0 for e in graph.edges())


def test_parse_skips_blank_lines_and_crlf():
    graph, tasks = parse_lines(["A\tB\r\n", "\n", "   ", "C\r"])
    assert tasks.names == ["A", "B", "C"]
    assert graph.count_edges() == 1


def test_parse_rejects_empty_task_name():
    with pytest.raises(TaskFileError) as exc:
        parse_lines(["A\tB", "C\t\tD"], source="tasks.txt")
    assert exc.value.line == 2
    assert "tasks.txt:2" in str(exc.value)


def test_parse_custom_delimiter():
    _, tasks = parse_lines(["A,B"], delimiter=",")
    assert tasks.names == ["A", "B"]


def test_load_tasks(tmp_path: Path):
    p = tmp_path / "tasks.txt"
    p.write_text("wash\tsoap\nsoap\n", encoding="utf-8")
    graph, tasks = load_tasks(p)
    assert tasks.names == ["wash", "soap"]
    assert graph.are_adjacent(1, 0)


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(TaskFileError):
        load_tasks(tmp_path / "nope.txt")


def test_parse_ignores_trailing_delimiter():
    graph, tasks = parse_lines(["A\tB\t", "B\t"])
    assert tasks.names == ["A", "B"]
    assert graph.count_edges() == 1
    assert graph.are_adjacent(tasks.id_of("B"), tasks.id_of("A"))


def test_parse_trims_spaces_around_names():
    _, tasks = parse_lines(["A \t B"])
    assert tasks.names == ["A", "B"]
