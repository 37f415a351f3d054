"""Accuracy and speed measures for a typing test."""


def compare_accuracy(reference: str, answer: str) -> float:
    """Fraction of the reference typed correctly, position by position.

    Every differing position and every missing or extra character counts
    as one mistake; the result is ``1 - mistakes / len(reference)``.
    """
    if not reference:
        raise ValueError("reference must not be empty")
    mistakes = abs(len(answer) - len(reference))
    mistakes += sum(1 for expected, typed in zip(reference, answer) if expected != typed)
    return 1 - mistakes / len(reference)


def words_per_minute(seconds: float, words: float) -> float:
    """Words typed per minute given the elapsed time in seconds."""
    if seconds == 0:
        raise ValueError("elapsed time must not be zero")
    return words / (seconds / 60)