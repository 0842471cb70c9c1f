import math
import re

# All-caps section header on its own line; tolerates CRLF line endings
HEADER_PATTERN = re.compile(r'^[A-Z][A-Z \t]*\r?$', re.MULTILINE)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (12.5 -> 13)"""
    return int(math.floor(value + 0.5))
