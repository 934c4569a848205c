"""Conversion of free-text form fields into MATLAB literals."""

import re

_DISALLOWED = re.compile(r"[^\w,]")
_NUMBER = re.compile(r"^\d+(e\d+)?$", re.IGNORECASE)
_BOOLEANS = ("true", "false")


def classify_token(token: str) -> str:
    """Render one token as a MATLAB literal.

    Numbers and booleans are emitted lower-cased and unquoted, an empty
    token stays empty, anything else becomes a single-quoted char array.
    """
    token = token.strip()
    if not token:
        return token
    if _NUMBER.match(token) or token.lower() in _BOOLEANS:
        return token.lower()
    return f"'{token}'"


def input_correction(text: str) -> str:
    """
    Turn comma separated user input into comma separated MATLAB literals.

    Every character that is neither a word character nor a comma is
    dropped first, so decimal points and signs do not survive.

    Examples
    --------
    >>> input_correction("L_MASTOID, true, 42")
    "'L_MASTOID', true, 42"
    """
    if not text:
        return ""
    cleaned = _DISALLOWED.sub("", text)
    return ", ".join(classify_token(token) for token in cleaned.split(","))


def as_cell_array(text: str) -> str:
    """Sanitized tokens wrapped as a MATLAB cell array literal."""
    return "{" + input_correction(text) + "}"


def quote(text: str) -> str:
    """Single-quote a MATLAB char array, doubling embedded quotes."""
    return "'" + text.replace("'", "''") + "'"
