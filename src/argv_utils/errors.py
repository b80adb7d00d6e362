from __future__ import annotations
from enum import IntEnum
from typing import Iterable, Optional


class ErrorKind(IntEnum):
    """
    Kinds of command-line option errors; the integer value of each is its index
    into the (localizable) error message table, so the order here is fixed.
    """
    OPTION_ALREADY_EXISTS = 0
    SHORT_OPTION_ALREADY_EXISTS = 1
    LONG_OPTION_ALREADY_EXISTS = 2
    OPTION_NOT_SET = 3
    OPTION_TYPE_MISMATCH = 4
    OPTION_NOT_FOUND = 5
    OPTION_TYPE_UNDEFINED = 6
    BOOLEAN_VALUE_MISMATCH = 7
    INTEGER_VALUE_MISMATCH = 8
    FLOAT_VALUE_MISMATCH = 9
    MISSING_OPTION_ARGUMENT = 10
    MANDATORY_OPTION_NOT_SET = 11
    OPTION_IDENTIFIER_NOT_FOUND = 12
    OPTION_ARGUMENT_ALREADY_ASSIGNED = 13


ERROR_MESSAGE_COUNT = len(ErrorKind)

DEFAULT_ERROR_MESSAGES = (
    "option already exists",
    "single character option already exists",
    "long form option already exists",
    "is not set",
    "is not of the required type",
    "option not found",
    "Undefined command line option",
    "cannot set a boolean value to this option type",
    "cannot set an integer value to this option type",
    "cannot set a floating point value to this option type",
    "missing option argument",
    "mandatory option has not been set",
    "option identifier not found",
    "option argument already assigned"
)


class ArgvError(Exception):

    def __init__(self, kind: ErrorKind, flags: str, type_name: str, message: str) -> None:
        self._kind = kind
        self._flags = flags if isinstance(flags, str) else ""
        self._type_name = type_name if isinstance(type_name, str) else ""
        self._message = message if isinstance(message, str) else ""
        super().__init__(str(self))

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def flags(self) -> str:
        return self._flags

    @property
    def type_name(self) -> str:
        return self._type_name

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return f"{self._type_name} {self._flags}: {self._message}"

    def __repr__(self) -> str:
        return f"ArgvError({self._kind.name}, {self._flags!r}, {self._type_name!r}, {self._message!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ArgvError):
            return NotImplemented
        return ((self._flags, self._type_name, self._message) ==
                (other._flags, other._type_name, other._message))

    def __hash__(self) -> int:
        return hash((self._flags, self._type_name, self._message))


class ErrorMessages:
    """
    Immutable table of error messages indexed by ErrorKind. A caller supplied table
    replaces the default English one wholesale and is taken as-is, i.e. in ErrorKind
    order with ERROR_MESSAGE_COUNT entries; its completeness is up to the caller.
    """
    def __init__(self, messages: Optional[Iterable[str]] = None) -> None:
        self._messages = tuple(messages) if messages is not None else DEFAULT_ERROR_MESSAGES

    def __getitem__(self, kind: ErrorKind) -> str:
        return self._messages[kind]

    def error(self, kind: ErrorKind, option: Optional[object] = None,
              flags: Optional[str] = None, type_name: Optional[str] = None) -> ArgvError:
        if option is not None:
            if flags is None:
                flags = option.flags
            if type_name is None:
                type_name = option.type_name
        return ArgvError(kind, flags or "", type_name or "", self[kind])


DEFAULT_MESSAGES = ErrorMessages()
