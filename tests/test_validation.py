"""Tests for the save-time rule engine."""

from __future__ import annotations

from flowbuilder.domain.validation import (
    VERDICT_MESSAGES,
    SaveVerdict,
    dangling_starts,
    validate_for_save,
)

from tests.builders import edge, make_graph


def test_three_node_loop_is_reported_as_cycle() -> None:
    nodes, edges = make_graph(["1", "2", "3"], [("1", "2"), ("2", "3"), ("3", "1")])

    assert validate_for_save(nodes, edges) is SaveVerdict.CYCLE_DETECTED


def test_two_dangling_starts_fail() -> None:
    nodes, edges = make_graph(["1", "2", "3"], [("1", "2"), ("3", "2")])

    assert dangling_starts(nodes, edges) == ["1", "3"]
    assert validate_for_save(nodes, edges) is SaveVerdict.MULTIPLE_DANGLING_STARTS


def test_single_node_is_exempt() -> None:
    nodes, edges = make_graph(["1"])

    assert validate_for_save(nodes, edges) is SaveVerdict.OK


def test_empty_flow_is_ok() -> None:
    assert validate_for_save([], []) is SaveVerdict.OK


def test_linear_flow_is_ok() -> None:
    nodes, edges = make_graph(["1", "2", "3"], [("1", "2"), ("2", "3")])

    assert validate_for_save(nodes, edges) is SaveVerdict.OK


def test_two_disconnected_nodes_fail() -> None:
    nodes, edges = make_graph(["1", "2"])

    assert validate_for_save(nodes, edges) is SaveVerdict.MULTIPLE_DANGLING_STARTS


def test_cycle_takes_precedence_over_dangling_starts() -> None:
    nodes, edges = make_graph(
        ["a", "b", "x", "y"], [("x", "y"), ("y", "x")]
    )

    assert len(dangling_starts(nodes, edges)) == 2
    assert validate_for_save(nodes, edges) is SaveVerdict.CYCLE_DETECTED


def test_edge_to_missing_node_still_counts_its_target() -> None:
    nodes, _ = make_graph(["a", "b"])

    assert validate_for_save(nodes, [edge("a", "b"), edge("b", "ghost")]) is SaveVerdict.OK


def test_validation_does_not_mutate_inputs() -> None:
    nodes, edges = make_graph(["1", "2"], [("1", "2")])
    before = (list(nodes), list(edges))

    validate_for_save(nodes, edges)

    assert (nodes, edges) == before


def test_every_verdict_has_a_message() -> None:
    assert set(VERDICT_MESSAGES) == set(SaveVerdict)
    assert VERDICT_MESSAGES[SaveVerdict.CYCLE_DETECTED] == "Cannot save flow: Infinite loop detected."
