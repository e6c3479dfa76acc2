"""
Masking utilities for sensitive data in logs.

Access tokens are never logged in full; only a short prefix and suffix are
kept so that two tokens can still be told apart when debugging.
"""

from typing import Optional


def mask_partial(value: Optional[str], show_start: int = 2, show_end: int = 2) -> str:
    """
    Partially mask a value, showing first and last few characters.

    Args:
        value: The value to partially mask
        show_start: Number of characters to show at the start
        show_end: Number of characters to show at the end

    Returns:
        Partially masked string like 'ab****yz', or 'None' if value is None/empty

    Examples:
        'username' -> 'us****me'
        'abcd' -> '****'
    """
    if not value:
        return 'None'

    value_str = str(value)
    hidden = len(value_str) - show_start - show_end
    # Too short to reveal anything safely
    if hidden < 4:
        return '*' * len(value_str)

    return value_str[:show_start] + '*' * hidden + value_str[-show_end:]


def mask_token(token: Optional[str]) -> str:
    """
    Mask an access token (JWT or opaque).

    Returns:
        Masked token like 'eyJh********Q5c', or 'None' if token is None/empty
    """
    if not token:
        return 'None'
    masked = mask_partial(token, show_start=4, show_end=3)
    # Collapse long runs so log lines stay short
    if len(masked) > 15:
        masked = masked[:4] + '*' * 8 + masked[-3:]
    return masked
