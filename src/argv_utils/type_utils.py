import re
from typing import Optional

integer_pattern = re.compile(r"^[+-]?[0-9]+$")
float_pattern = re.compile(r"^[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)$",
                           re.IGNORECASE)


def is_boolean(value: str) -> bool:
    return to_boolean(value) is not None


def to_boolean(value: str) -> Optional[bool]:
    # Only the exact literals; no stripping and no case folding.
    if value == "true":
        return True
    elif value == "false":
        return False
    return None


def is_integer(value: str) -> bool:
    return to_integer(value) is not None


def to_integer(value: str) -> Optional[int]:
    if isinstance(value, str) and integer_pattern.fullmatch(value):
        return int(value)
    return None


def is_float(value: str) -> bool:
    return to_float(value) is not None


def to_float(value: str) -> Optional[float]:
    if isinstance(value, str) and float_pattern.fullmatch(value):
        try:
            return float(value)
        except ValueError:
            pass
    return None


def to_string(value: str) -> Optional[str]:
    return value if isinstance(value, str) else None
