"""Stack operations and classic stack use-cases.

The stack is a list whose last index is the top. Use-case algorithms trace a
scratch stack of their own; the caller's stack is left as it was.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from dsatrace.algorithms.params import TextParams, ValueParams, ValuesParams
from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.tracing import Trace

_PAIRS = {")": "(", "]": "[", "}": "{"}
_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}
_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
}
_INFIX_TOKEN = re.compile(r"\s*(?:(\w+)|(.))")


def _top(stack: list) -> int:
    return len(stack) - 1


def _number(token: str) -> int | float | None:
    for convert in (int, float):
        try:
            return convert(token)
        except ValueError:
            continue
    return None


def _tidy(value: float) -> int | float:
    return int(value) if isinstance(value, float) and value.is_integer() else value


@algorithm(AlgorithmId.STACK_PUSH, params=ValueParams)
def stack_push(run: AlgorithmRun[ValueParams], stack: list[int]) -> Trace:
    if len(stack) >= run.settings.stack_capacity:
        return run.structural(stack, "Stack full! Cannot push.")
    value = run.params.value
    run.step(stack, line=0, message=f"Pushing {value}")
    stack.append(value)
    run.step(stack, [_top(stack)], 1, "Pushed")
    return run.finish(value=value)


@algorithm(AlgorithmId.STACK_POP)
def stack_pop(run: AlgorithmRun[None], stack: list[int]) -> Trace:
    if not stack:
        return run.structural(stack, "Stack empty! Cannot pop.")
    run.step(stack, [_top(stack)], 0, "Popping top")
    value = stack.pop()
    run.step(stack, line=1, message=f"Popped {value}")
    return run.finish(value=value)


@algorithm(AlgorithmId.STACK_PEEK)
def stack_peek(run: AlgorithmRun[None], stack: list[int]) -> Trace:
    if not stack:
        return run.structural(stack, "Stack empty! Cannot peek.")
    run.step(stack, [_top(stack)], 0, f"Peeking top: {stack[-1]}")
    return run.finish(value=stack[-1])


@algorithm(AlgorithmId.STACK_IS_EMPTY)
def stack_is_empty(run: AlgorithmRun[None], stack: list[int]) -> Trace:
    empty = not stack
    run.step(stack, line=0, message=f"Is Empty: {empty}")
    return run.finish(result=empty)


@algorithm(AlgorithmId.STACK_IS_FULL)
def stack_is_full(run: AlgorithmRun[None], stack: list[int]) -> Trace:
    full = len(stack) >= run.settings.stack_capacity
    run.step(stack, line=0, message=f"Is Full: {full}")
    return run.finish(result=full)


@algorithm(AlgorithmId.BALANCED_PARENTHESES, params=TextParams)
def balanced_parentheses(run: AlgorithmRun[TextParams], _stack: list[int]) -> Trace:
    scratch: list[str] = []
    for char in run.params.text:
        run.step(scratch, line=0, message=f"Processing '{char}'")
        if char in "([{":
            scratch.append(char)
            run.step(scratch, [_top(scratch)], 1, f"Pushed '{char}'")
        elif char in _PAIRS:
            if not scratch or scratch[-1] != _PAIRS[char]:
                run.step(scratch, line=2, message="Mismatch!")
                return run.finish(balanced=False)
            opener = scratch.pop()
            run.step(scratch, line=2, message=f"Popped '{opener}'")
    balanced = not scratch
    run.step(scratch, line=3, message="Balanced!" if balanced else "Not balanced")
    return run.finish(balanced=balanced)


@algorithm(AlgorithmId.POSTFIX_EVAL, params=TextParams)
def postfix_eval(run: AlgorithmRun[TextParams], _stack: list[int]) -> Trace:
    scratch: list[int | float] = []
    for token in run.params.text.split():
        run.step(scratch, line=0, message=f"Processing '{token}'")
        number = _number(token)
        if number is not None:
            scratch.append(number)
            run.step(scratch, [_top(scratch)], 1, f"Pushed {token}")
            continue
        if token not in _OPERATORS:
            run.step(scratch, line=2, message=f"Unknown operator '{token}'")
            return run.finish(result=None)
        if len(scratch) < 2:
            run.step(scratch, line=2, message="Invalid expression")
            return run.finish(result=None)
        b = scratch.pop()
        a = scratch.pop()
        if token == "/" and b == 0:
            run.step(scratch, line=2, message="Division by zero")
            return run.finish(result=None)
        result = _tidy(_OPERATORS[token](a, b))
        scratch.append(result)
        run.step(scratch, [_top(scratch)], 2, f"Applied {token}: {result}")
    if len(scratch) == 1:
        run.step(scratch, [0], 3, f"Result: {scratch[0]}")
        return run.finish(result=scratch[0])
    run.step(scratch, line=3, message="Invalid expression")
    return run.finish(result=None)


@algorithm(AlgorithmId.INFIX_TO_POSTFIX, params=TextParams)
def infix_to_postfix(run: AlgorithmRun[TextParams], stack: list[int]) -> Trace:
    tokens: list[str] = []
    for operand, symbol in _INFIX_TOKEN.findall(run.params.text):
        if operand:
            tokens.append(operand)
        elif symbol and not symbol.isspace():
            if symbol not in _PRECEDENCE and symbol not in "()":
                return run.precondition(stack, f"Unexpected character '{symbol}'")
            tokens.append(symbol)

    scratch: list[str] = []
    output: list[str] = []
    for token in tokens:
        run.step(scratch, line=0, message=f"Processing '{token}'")
        if token == "(":
            scratch.append(token)
            run.step(scratch, [_top(scratch)], 2, "Pushed '('")
        elif token == ")":
            while scratch and scratch[-1] != "(":
                output.append(scratch.pop())
                run.step(scratch, line=3, message=f"Output: {' '.join(output)}")
            if not scratch:
                run.step(scratch, line=3, message="Mismatched parentheses")
                return run.finish(postfix=None)
            scratch.pop()
            run.step(scratch, line=3, message="Popped '('")
        elif token in _PRECEDENCE:
            while scratch and _PRECEDENCE.get(scratch[-1], 0) >= _PRECEDENCE[token]:
                output.append(scratch.pop())
                run.step(scratch, line=4, message=f"Output: {' '.join(output)}")
            scratch.append(token)
            run.step(scratch, [_top(scratch)], 4, f"Pushed {token}")
        else:
            output.append(token)
            run.step(scratch, line=1, message=f"Output: {' '.join(output)}")
    while scratch:
        operator = scratch.pop()
        if operator == "(":
            run.step(scratch, line=5, message="Mismatched parentheses")
            return run.finish(postfix=None)
        output.append(operator)
        run.step(scratch, line=5, message=f"Output: {' '.join(output)}")
    postfix = " ".join(output)
    run.step(scratch, line=5, message=f"Postfix: {postfix}")
    return run.finish(postfix=postfix)


@algorithm(AlgorithmId.UNDO_SIMULATION, params=TextParams)
def undo_simulation(run: AlgorithmRun[TextParams], _stack: list[int]) -> Trace:
    history: list[str] = []
    current = ""
    for char in run.params.text:
        current += char
        history.append(current)
        run.step(history, [_top(history)], 0, f"Typed: {current}")
    history.pop()
    current = history[-1] if history else ""
    run.step(history, line=1, message=f"Undo: {current}")
    return run.finish(text=current)


@algorithm(AlgorithmId.STACK_PALINDROME, params=TextParams)
def stack_palindrome(run: AlgorithmRun[TextParams], _stack: list[int]) -> Trace:
    text = "".join(run.params.text.split()).lower()
    scratch: list[str] = []
    mid = len(text) // 2
    for i in range(mid):
        scratch.append(text[i])
        run.step(scratch, [_top(scratch)], 0, f"Pushed '{text[i]}'")
    for i in range(mid + len(text) % 2, len(text)):
        top = scratch.pop()
        run.step(scratch, line=1, message=f"Comparing '{top}' with '{text[i]}'")
        if top != text[i]:
            run.step(scratch, line=1, message="Not a palindrome")
            return run.finish(palindrome=False)
    run.step(scratch, line=1, message="Palindrome!")
    return run.finish(palindrome=True)


@algorithm(AlgorithmId.NEXT_GREATER, params=ValuesParams)
def next_greater(run: AlgorithmRun[ValuesParams], _stack: list[int]) -> Trace:
    values = run.params.values
    result = [-1] * len(values)
    scratch: list[int] = []
    for i, value in enumerate(values):
        run.step(scratch, line=0, message=f"Processing {value}")
        while scratch and values[scratch[-1]] < value:
            index = scratch.pop()
            result[index] = value
            run.step(scratch, line=1, message=f"Next greater for {values[index]} is {value}")
        scratch.append(i)
        run.step(scratch, [_top(scratch)], 2, f"Pushed index {i}")
    run.step(scratch, line=3, message=f"Result: [{', '.join(map(str, result))}]")
    return run.finish(result=result)


@algorithm(AlgorithmId.STACK_REVERSE, params=TextParams)
def stack_reverse(run: AlgorithmRun[TextParams], _stack: list[int]) -> Trace:
    text = run.params.text
    is_sequence = "," in text
    elements = [part.strip() for part in text.split(",")] if is_sequence else list(text)
    scratch: list[str] = []
    for element in elements:
        scratch.append(element)
        run.step(scratch, [_top(scratch)], 0, f"Pushed '{element}'")
    reversed_elements: list[str] = []
    while scratch:
        element = scratch.pop()
        reversed_elements.append(element)
        run.step(scratch, line=1, message=f"Popped '{element}'")
    joined = (", " if is_sequence else "").join(reversed_elements)
    run.step(scratch, line=1, message=f"Reversed: {joined}")
    return run.finish(reversed=joined)
