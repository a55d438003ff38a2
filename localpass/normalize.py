import string

# Casing is ASCII-only; other characters pass through unchanged
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

CODE_LENGTH = 3


def ascii_upper(s: str) -> str:
    return s.translate(_TO_UPPER)


def ascii_lower(s: str) -> str:
    return s.translate(_TO_LOWER)


def title_case(s: str) -> str:
    """First character upper-cased, the rest lower-cased. Not per word."""
    return ascii_upper(s[:1]) + ascii_lower(s[1:])


def station_code(station: str) -> str:
    # Short names are used whole, no padding
    return ascii_upper(station[:CODE_LENGTH])


def compute_pass_id(class_type: str, origin: str, destination: str) -> str:
    return ascii_upper(class_type[:1]) + station_code(origin) + station_code(destination)
