"""String algorithms.

Frames usually snapshot the input text; operations that build a new string
(reverse, substring, concatenation, run-length encoding) show it as it grows.
Highlights are character indices into the frame's own snapshot.
"""

from __future__ import annotations

from collections import Counter

from dsatrace.algorithms.params import OtherParams, PatternParams, RangeParams
from dsatrace.algorithms.registry import AlgorithmRun, algorithm
from dsatrace.core.catalog import AlgorithmId
from dsatrace.tracing import Trace


def _check(run: AlgorithmRun, text: str, *others: str) -> Trace | None:
    """Reject over-long inputs and an empty primary string; None when acceptable."""
    limit = run.settings.string_max_length
    if any(len(s) > limit for s in (text, *others)):
        return run.precondition(text, f"String too long! (max {limit} characters)")
    if not text:
        return run.structural(text, "String empty.")
    return None


@algorithm(AlgorithmId.STRING_TRAVERSE)
def string_traverse(run: AlgorithmRun[None], text: str) -> Trace:
    if (rejected := _check(run, text)) is not None:
        return rejected
    run.step(text, line=0, message=f"Length: {len(text)}")
    for i, char in enumerate(text):
        run.step(text, [i], 1, f"Visiting char {char} at {i}")
    run.step(text, line=3, message=f"Total length: {len(text)}")
    return run.finish(length=len(text))


@algorithm(AlgorithmId.STRING_REVERSE)
def string_reverse(run: AlgorithmRun[None], text: str) -> Trace:
    if (rejected := _check(run, text)) is not None:
        return rejected
    chars = list(text)
    left, right = 0, len(chars) - 1
    run.step(text, [left, right], 0, "Starting reverse")
    while left < right:
        run.step("".join(chars), [left, right], 1, f"Swap {chars[left]} and {chars[right]}")
        chars[left], chars[right] = chars[right], chars[left]
        run.step("".join(chars), [left, right], 2, "Swapped")
        left += 1
        right -= 1
    result = "".join(chars)
    run.step(result, line=-1, message="Reversed string")
    return run.finish(result=result)


@algorithm(AlgorithmId.SUBSTRING, params=RangeParams)
def substring(run: AlgorithmRun[RangeParams], text: str) -> Trace:
    if (rejected := _check(run, text)) is not None:
        return rejected
    start, end = run.params.start, run.params.end
    if end >= len(text) or start > end:
        return run.structural(text, "Invalid indices!")
    result = text[start : end + 1]
    run.step(text, range(start, end + 1), 0, f"Extracting from {start} to {end}")
    run.step(result, line=1, message=f'Substring: "{result}"')
    return run.finish(result=result)


@algorithm(AlgorithmId.CONCATENATE, params=OtherParams)
def concatenate(run: AlgorithmRun[OtherParams], text: str) -> Trace:
    other = run.params.other
    limit = run.settings.string_max_length
    if len(text) > limit or len(other) > limit:
        return run.precondition(text, f"String too long! (max {limit} characters)")
    result = text + other
    run.step(text, line=0, message=f'Concatenating "{text}" + "{other}"')
    seam = [len(text) - 1, len(text)] if text else [0]
    run.step(result, seam, 1, f'Result: "{result}"')
    return run.finish(result=result)


@algorithm(AlgorithmId.STRING_PALINDROME)
def string_palindrome(run: AlgorithmRun[None], text: str) -> Trace:
    if (rejected := _check(run, text)) is not None:
        return rejected
    left, right = 0, len(text) - 1
    run.step(text, [left, right], 0, "Checking palindrome")
    while left < right:
        run.step(text, [left, right], 1, f"Compare {text[left]} and {text[right]}")
        if text[left] != text[right]:
            run.step(text, [left, right], 2, "Not equal! Not palindrome")
            return run.finish(palindrome=False)
        run.step(text, [left, right], 3, "Equal, continue")
        left += 1
        right -= 1
    run.step(text, line=4, message="Is palindrome: true")
    return run.finish(palindrome=True)


@algorithm(AlgorithmId.ANAGRAM, params=OtherParams)
def anagram(run: AlgorithmRun[OtherParams], text: str) -> Trace:
    other = run.params.other
    if (rejected := _check(run, text, other)) is not None:
        return rejected
    if len(text) != len(other):
        run.step(text, line=1, message="Different lengths, not anagram")
        return run.finish(anagram=False)
    ordered = "".join(sorted(text))
    other_ordered = "".join(sorted(other))
    run.step(text, line=0, message=f'Sorting "{text}"')
    run.step(ordered, line=0, message=f'Sorted: "{ordered}"')
    run.step(other, line=0, message=f'Sorting "{other}"')
    run.step(other_ordered, line=0, message=f'Sorted: "{other_ordered}"')
    result = ordered == other_ordered
    run.step(text, line=1, message=f"Is anagram: {str(result).lower()}")
    return run.finish(anagram=result)


def _found(matches: list[int]) -> str:
    return f"Found at: {', '.join(map(str, matches)) or 'none'}"


@algorithm(AlgorithmId.NAIVE_PATTERN_SEARCH, params=PatternParams)
def naive_pattern_search(run: AlgorithmRun[PatternParams], text: str) -> Trace:
    pattern = run.params.pattern
    if (rejected := _check(run, text, pattern)) is not None:
        return rejected
    n, m = len(text), len(pattern)
    matches: list[int] = []
    for i in range(n - m + 1):
        run.step(text, [i], 0, f"Trying start at {i}")
        for j in range(m):
            run.step(text, [i + j], 1, f"Compare {text[i + j]} == {pattern[j]}")
            if text[i + j] != pattern[j]:
                run.step(text, [i + j], 2, "Mismatch")
                break
        else:
            matches.append(i)
            run.step(text, range(i, i + m), 3, f"Match at {i}")
    run.step(text, line=-1, message=_found(matches))
    return run.finish(matches=matches)


def prefix_table(pattern: str) -> list[int]:
    """KMP failure function: longest proper prefix that is also a suffix."""
    table = [0] * len(pattern)
    k = 0
    for q in range(1, len(pattern)):
        while k > 0 and pattern[k] != pattern[q]:
            k = table[k - 1]
        if pattern[k] == pattern[q]:
            k += 1
        table[q] = k
    return table


@algorithm(AlgorithmId.KMP_SEARCH, params=PatternParams)
def kmp_search(run: AlgorithmRun[PatternParams], text: str) -> Trace:
    pattern = run.params.pattern
    if (rejected := _check(run, text, pattern)) is not None:
        return rejected
    table = prefix_table(pattern)
    run.step(pattern, line=0, message="Building prefix table")
    run.step(pattern, line=1, message=f"Prefix table: {' '.join(map(str, table))}")

    n, m = len(text), len(pattern)
    matches: list[int] = []
    i = j = 0
    while i < n:
        run.step(text, [i], 2, f"i={i}, j={j}")
        if text[i] == pattern[j]:
            i += 1
            j += 1
            if j == m:
                matches.append(i - m)
                run.step(text, range(i - m, i), 3, f"Found at {i - m}")
                j = table[j - 1]
        elif j:
            j = table[j - 1]
            run.step(text, [i], 4, f"Mismatch, j={j}")
        else:
            run.step(text, [i], 4, f"Mismatch, j={j}")
            i += 1
    run.step(text, line=-1, message=_found(matches))
    return run.finish(matches=matches, prefix_table=table)


@algorithm(AlgorithmId.LCS, params=OtherParams)
def longest_common_subsequence(run: AlgorithmRun[OtherParams], text: str) -> Trace:
    other = run.params.other
    if (rejected := _check(run, text, other)) is not None:
        return rejected
    m, n = len(text), len(other)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    run.step(text, line=0, message=f'LCS of "{text}" and "{other}"')
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if text[i - 1] == other[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
            run.step(text, [i - 1], 2, f"dp[{i}][{j}] = {dp[i][j]}")

    chars: list[str] = []
    positions: list[int] = []
    i, j = m, n
    while i and j:
        if text[i - 1] == other[j - 1]:
            chars.append(text[i - 1])
            positions.append(i - 1)
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    sequence = "".join(reversed(chars))
    run.step(text, positions, 4, f"LCS length: {dp[m][n]}")
    return run.finish(length=dp[m][n], sequence=sequence)


@algorithm(AlgorithmId.RUN_LENGTH_ENCODE)
def run_length_encode(run: AlgorithmRun[None], text: str) -> Trace:
    if (rejected := _check(run, text)) is not None:
        return rejected
    encoded = ""
    count = 1
    run.step(text, [0], 0, "Starting compression")
    for i in range(1, len(text) + 1):
        if i < len(text) and text[i] == text[i - 1]:
            count += 1
            run.step(text, [i - 1, i], 2, f"Count {text[i - 1]}: {count}")
        else:
            encoded += f"{text[i - 1]}{count}"
            run.step(encoded, line=3, message=f"Add {text[i - 1]}{count}")
            count = 1
    run.step(encoded, line=-1, message=f'Compressed: "{encoded}"')
    return run.finish(result=encoded)


@algorithm(AlgorithmId.CHAR_FREQUENCY)
def char_frequency(run: AlgorithmRun[None], text: str) -> Trace:
    if (rejected := _check(run, text)) is not None:
        return rejected
    counts: Counter[str] = Counter()
    for i, char in enumerate(text):
        counts[char] += 1
        run.step(text, [i], 1, f"Count {char}: {counts[char]}")
    summary = ", ".join(f"{char}:{count}" for char, count in counts.items())
    run.step(text, line=2, message=f"Frequencies: {summary}")
    return run.finish(frequencies=dict(counts))
