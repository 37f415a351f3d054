"""Sources of reference sentences for a typing test."""

from __future__ import annotations

import random

import requests

WORDS = (
    " Apple", " Banana", " Carrot", " Mango", " Apricot", " Pear",
    " Strawberry", " Blueberry", " Raspberry", " Orange", " Grapefruit",
    " Peach", " Nectarine", " Lime", " Pineapple", " Guava", " Watermelon",
    " Kiwi", " Cantaloupe",
)

WORD_API_URL = "https://random-word-api.herokuapp.com/word"
QUOTE_API_URL = "https://api.kanye.rest/"
TIMEOUT = 10


def _resolve_count(num: int, rng: random.Random) -> int:
    return rng.randrange(5) + 1 if num < 0 else num


def generate_reference_string(num: int = -1, rng: random.Random | None = None) -> str:
    """Pick ``num`` distinct words from the built-in list, 1 to 5 if negative."""
    rng = rng or random.Random()
    num = _resolve_count(num, rng)
    if num == 0:
        raise ValueError("number of words must not be zero")
    if num > len(WORDS):
        raise ValueError(f"number of words must be at most {len(WORDS)}")
    pool = list(WORDS)
    picked = [pool.pop(rng.randrange(len(pool))) for _ in range(num)]
    return "".join(picked)[1:]


def generate_reference_string_api(
    num: int = -1,
    rng: random.Random | None = None,
    session: requests.Session | None = None,
) -> str:
    """Fetch ``num`` random words from the word API; empty string on failure."""
    rng = rng or random.Random()
    num = _resolve_count(num, rng)
    session = session or requests.Session()
    try:
        response = session.get(WORD_API_URL, params={"number": num}, timeout=TIMEOUT)
    except requests.RequestException:
        response = None
    if response is None or response.status_code != 200:
        print("Call failed")
        return ""
    return " ".join(str(word) for word in response.json())


def generate_reference_quote(session: requests.Session | None = None) -> str:
    """Fetch a quote from the quote API; empty string on failure."""
    session = session or requests.Session()
    try:
        response = session.get(QUOTE_API_URL, timeout=TIMEOUT)
    except requests.RequestException:
        return ""
    if response.status_code != 200:
        return ""
    return response.json()["quote"]