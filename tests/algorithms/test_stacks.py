"""Tests for stack operations and stack use-cases."""

import pytest

from dsatrace import AlgorithmId, EngineSettings, RejectionKind, run_algorithm


def test_push_and_top_is_last_index():
    trace = run_algorithm(AlgorithmId.STACK_PUSH, [1, 2], {"value": 3})
    assert trace.final_snapshot == (1, 2, 3)
    assert trace[-1].highlight == frozenset({2})


def test_push_full():
    trace = run_algorithm(AlgorithmId.STACK_PUSH, [1], {"value": 2}, EngineSettings(stack_capacity=1))
    assert trace.rejection.kind is RejectionKind.STRUCTURAL
    assert trace[0].message == "Stack full! Cannot push."


def test_pop():
    trace = run_algorithm(AlgorithmId.STACK_POP, [1, 2])
    assert trace.outcome["value"] == 2
    assert trace.final_snapshot == (1,)
    assert trace[-1].message == "Popped 2"


@pytest.mark.parametrize("kind", [AlgorithmId.STACK_POP, AlgorithmId.STACK_PEEK])
def test_empty_stack_rejected(kind):
    trace = run_algorithm(kind, [])
    assert trace.rejection.kind is RejectionKind.STRUCTURAL
    assert trace[0].message.startswith("Stack empty!")


def test_peek_and_predicates():
    assert run_algorithm(AlgorithmId.STACK_PEEK, [4, 5]).outcome["value"] == 5
    assert run_algorithm(AlgorithmId.STACK_IS_EMPTY, []).outcome["result"] is True
    full = run_algorithm(AlgorithmId.STACK_IS_FULL, [1, 2], settings=EngineSettings(stack_capacity=2))
    assert full.outcome["result"] is True


@pytest.mark.parametrize(
    "text, balanced",
    [("([]{})", True), ("(]", False), ("((", False), (")", False), ("a(b)c", True)],
)
def test_balanced_parentheses(text, balanced):
    trace = run_algorithm(AlgorithmId.BALANCED_PARENTHESES, [], {"text": text})
    assert trace.outcome["balanced"] is balanced


def test_use_cases_leave_stack_alone():
    stack = [7, 8]
    trace = run_algorithm(AlgorithmId.BALANCED_PARENTHESES, stack, {"text": "()"})
    assert stack == [7, 8]
    assert trace[-1].message == "Balanced!"


@pytest.mark.parametrize(
    "expression, result",
    [("2 3 +", 5), ("5 1 2 + 4 * + 3 -", 14), ("7 2 /", 3.5), ("6 3 /", 2)],
)
def test_postfix_eval(expression, result):
    trace = run_algorithm(AlgorithmId.POSTFIX_EVAL, [], {"text": expression})
    assert trace.outcome["result"] == result
    assert trace[-1].message == f"Result: {result}"


@pytest.mark.parametrize(
    "expression, message",
    [("1 0 /", "Division by zero"), ("1 +", "Invalid expression"), ("1 2 ^", "Unknown operator '^'"), ("1 2", "Invalid expression")],
)
def test_postfix_eval_errors_end_normally(expression, message):
    trace = run_algorithm(AlgorithmId.POSTFIX_EVAL, [], {"text": expression})
    assert not trace.is_rejected
    assert trace.outcome["result"] is None
    assert trace[-1].message == message


@pytest.mark.parametrize(
    "infix, postfix",
    [("a+b*c", "a b c * +"), ("(a+b)*c", "a b + c *"), ("12 + 3 - x", "12 3 + x -")],
)
def test_infix_to_postfix(infix, postfix):
    trace = run_algorithm(AlgorithmId.INFIX_TO_POSTFIX, [], {"text": infix})
    assert trace.outcome["postfix"] == postfix
    assert trace[-1].message == f"Postfix: {postfix}"


def test_infix_mismatched_parentheses():
    trace = run_algorithm(AlgorithmId.INFIX_TO_POSTFIX, [], {"text": "(a+b"})
    assert trace.outcome["postfix"] is None
    assert trace[-1].message == "Mismatched parentheses"


def test_infix_rejects_unknown_symbol():
    trace = run_algorithm(AlgorithmId.INFIX_TO_POSTFIX, [], {"text": "a%b"})
    assert trace.rejection.kind is RejectionKind.PRECONDITION


def test_undo_simulation():
    trace = run_algorithm(AlgorithmId.UNDO_SIMULATION, [], {"text": "abc"})
    assert trace.outcome["text"] == "ab"
    assert trace[-1].snapshot == ("a", "ab")


@pytest.mark.parametrize("text, expected", [("racecar", True), ("Never odd or even", True), ("ab", False)])
def test_stack_palindrome(text, expected):
    trace = run_algorithm(AlgorithmId.STACK_PALINDROME, [], {"text": text})
    assert trace.outcome["palindrome"] is expected


def test_next_greater():
    trace = run_algorithm(AlgorithmId.NEXT_GREATER, [], {"values": "4, 5, 2, 25"})
    assert trace.outcome["result"] == [5, 25, 25, -1]


def test_stack_reverse_text_and_sequence():
    assert run_algorithm(AlgorithmId.STACK_REVERSE, [], {"text": "abc"}).outcome["reversed"] == "cba"
    sequence = run_algorithm(AlgorithmId.STACK_REVERSE, [], {"text": "1, 2, 3"})
    assert sequence.outcome["reversed"] == "3, 2, 1"
