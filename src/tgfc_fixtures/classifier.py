"""Opponent classification.

Opponent names that start with a locational prefix keep the word after the
prefix in their class key, so teams are not lumped together by the prefix
alone:

    "North Brisbane"  -> "north_brisbane"
    "St George"       -> "st_george"
    "Sydney City"     -> "sydney"

The class is never displayed; templates use it as a grouping or styling key.
"""

from tgfc_fixtures.errors import ClassificationError

# Leading words (lower-cased) -> number of words that follow word 0 in the class.
PREFIX_WORD_COUNTS: dict[tuple[str, ...], int] = {
    ("the",): 1,
    ("mt",): 1,
    ("st",): 1,
    ("north",): 1,
    ("south",): 1,
    ("brisbane",): 1,
    ("western",): 1,
    ("ipswich",): 1,
    ("gold", "coast"): 2,
    ("sunshine", "coast"): 2,
}


def prefix_word_count(words: list[str]) -> int:
    """Look up how many words after the first belong in the class key.

    Two-word rules only fire when a second word exists.
    """
    if len(words) >= 2:
        count = PREFIX_WORD_COUNTS.get((words[0], words[1]))
        if count is not None:
            return count
    return PREFIX_WORD_COUNTS.get((words[0],), 0)


def classify_opponent(opponent: str) -> str:
    """Derive the class key for an opponent's display name.

    Args:
        opponent: Opponent text as it appears in the fixtures table.

    Returns:
        Lower-cased first word, joined by underscores with the prefix words.

    Raises:
        ClassificationError: If the text yields no words.
    """
    words = opponent.lower().split(" ")
    if not words:
        raise ClassificationError(f"No words in opponent name {opponent!r}")

    count = prefix_word_count(words)
    # A prefix word with nothing after it ("North") classifies as itself
    return "_".join(words[: count + 1])
