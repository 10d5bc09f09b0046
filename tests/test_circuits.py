from homeworkkit.circuits import (
    FIRST_LAW_OK,
    NEGATIVE_SOURCE,
    SECOND_LAW_OK,
    UNKNOWN_COMPONENT,
    UNKNOWN_LAW,
    Branch,
    Wire,
    first_law,
    run,
    second_law,
)


def test_first_law_balanced_loop():
    wires = [Wire(0, 1, 2.0), Wire(1, 2, 2.0), Wire(2, 0, 2.0)]
    assert first_law(3, wires) == FIRST_LAW_OK


def test_first_law_unbalanced_reports_node():
    wires = [Wire(0, 1, 2.0), Wire(1, 2, 3.0), Wire(2, 0, 2.0)]
    result = first_law(3, wires)
    assert result.startswith("Legea 1 a lui Kirchhoff nu se respecta")
    assert result.endswith("in nodul 1.")


def test_first_law_open_node():
    assert first_law(2, [Wire(0, 1, 1.0)]).startswith("Circuitul este deschis")


def test_second_law_balanced():
    assert second_law([Branch(1.0, [("R", 2.0), ("E", 2.0)])]) == SECOND_LAW_OK


def test_second_law_negative_source():
    assert second_law([Branch(1.0, [("E", -1.0)])]) == NEGATIVE_SOURCE


def test_second_law_unknown_component_line():
    lines = second_law([Branch(1.0, [("X", 1.0)])]).split("\n")
    assert lines == [UNKNOWN_COMPONENT, SECOND_LAW_OK]


def test_run_unknown_law():
    assert run("III\n") == UNKNOWN_LAW + "\n"


def test_run_first_law():
    assert run("I\n2 2\n0 1 1.5\n1 0 1.5\n") == FIRST_LAW_OK + "\n"