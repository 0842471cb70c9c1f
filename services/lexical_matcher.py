from rapidfuzz.distance import JaroWinkler

SIMILARITY_THRESHOLD = 0.8


def similarity(a: str, b: str) -> float:
    """Jaro-Winkler similarity of two strings, case-insensitive, in [0, 1]"""
    return JaroWinkler.similarity(a.lower(), b.lower(), prefix_weight=0.1)


def matches(a: str, b: str) -> bool:
    """True when the strings are equal ignoring case or nearly so."""
    if a.lower() == b.lower():
        return True
    return similarity(a, b) > SIMILARITY_THRESHOLD
