# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Longest-common-prefix reduction used to compute the autofill for a set of
completions.

The autofill is the text that can be inserted into the input without making a
choice on the user's behalf: every remaining candidate still starts with it.

Example:
    longest_common_prefix(["help", "history"])  → "h"
    longest_common_prefix(["help", "helm"])     → "hel"
"""
from typing import Sequence


def longest_common_prefix(words: Sequence[str]) -> str:
    """
    Return the longest leading substring shared by every word.

    Args:
        words (Sequence[str]): Words to reduce, usually already sorted.

    Returns:
        str: The shared prefix. Empty when `words` is empty or its first word is
            empty; the word itself when there is only one.
    """
    if not words or not words[0]:
        return ""
    first, *rest = words
    if not rest:
        return first

    index = 0
    while index < len(first) and all(
        index < len(word) and word[index] == first[index] for word in rest
    ):
        index += 1
    return first[:index]
