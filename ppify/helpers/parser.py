from typing import Optional

from ppify.helpers.errors import BadNumberError

# Counts are unsigned 32 bit integers in rosu-pp
MAX_UINT = 2 ** 32 - 1


def parse_uint(raw: str, label: str) -> int:
    """
    Parses an unsigned integer typed by the user.
    :param raw: Raw text.
    :param label: Name of the value, used in the error message.
    :return: The parsed integer.
    """
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise BadNumberError(f"{label} must be an unsigned integer, got `{raw}`")

    if not 0 <= value <= MAX_UINT:
        raise BadNumberError(f"{label} must be an unsigned integer up to {MAX_UINT}, got `{raw}`")
    return value


def parse_optional_uint(raw: Optional[str], label: str) -> Optional[int]:
    if raw is None or str(raw).strip() == '':
        return None
    return parse_uint(raw, label)


def parse_accuracy(raw: str) -> float:
    """
    Parses an accuracy given in percent, e.g. `98.75` or `98.75%`.
    """
    text = str(raw).strip().rstrip('%').strip()
    try:
        accuracy = float(text)
    except ValueError:
        raise BadNumberError(f"accuracy must be a floating number like 98.5, got `{raw}`")

    if not 0 <= accuracy <= 100:
        raise BadNumberError(f"accuracy must be between 0 and 100, got `{raw}`")
    return accuracy


def parse_user_id(user_input: str) -> Optional[int]:
    """
    Returns the user id if the input is numeric, None if it should be treated as a username.
    """
    trimmed = user_input.strip()
    if trimmed.isascii() and trimmed.isdigit():
        return int(trimmed)
    return None
