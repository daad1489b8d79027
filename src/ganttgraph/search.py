"""
Case-insensitive substring relevance using the Knuth-Morris-Pratt prefix function.
"""
from typing import List


def prefix_table(pattern: str) -> List[int]:
    """For each position, the length of the longest proper prefix of ``pattern`` that is also a suffix."""
    table = [0] * len(pattern)
    length = 0
    for i in range(1, len(pattern)):
        while length > 0 and pattern[i] != pattern[length]:
            length = table[length - 1]
        if pattern[i] == pattern[length]:
            length += 1
        table[i] = length
    return table

def relevance(pattern: str, text: str) -> int:
    """
    Score how much of ``pattern`` appears in ``text``.

    Returns:
        The lowercased pattern length when the pattern occurs in the text, otherwise the
        longest pattern prefix matched during the scan. 0 when either string is
        empty or the pattern is longer than the text.
    """
    pattern = pattern.lower()
    text = text.lower()
    if not pattern or not text or len(pattern) > len(text):
        return 0

    table = prefix_table(pattern)

    best = 0
    text_index = 0
    pattern_index = 0
    while text_index < len(text):
        if text[text_index] == pattern[pattern_index]:
            text_index += 1
            pattern_index += 1
            best = max(best, pattern_index)
            if pattern_index == len(pattern):
                return len(pattern)
        elif pattern_index:
            pattern_index = table[pattern_index - 1]
        else:
            text_index += 1

    return best

def is_relevant(pattern: str, text: str) -> bool:
    return relevance(pattern, text) == len(pattern.lower())
