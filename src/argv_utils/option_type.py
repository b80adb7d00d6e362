from __future__ import annotations
from enum import Enum
from typing import Any, Callable, Optional, Type
from argv_utils.type_utils import to_boolean, to_float, to_integer, to_string


class OptionType(Enum):

    UNDEFINED = "UndefinedCommandLineOptionType"
    BOOLEAN = "BooleanCommandLineOptionType"
    INTEGER = "IntegerCommandLineOptionType"
    FLOAT = "FPointCommandLineOptionType"
    STRING = "StringCommandLineOptionType"

    def __str__(self) -> str:
        return self.value

    @staticmethod
    def infer(value: Any) -> OptionType:
        """
        Returns the option type tag for the given native value; bool must be checked
        before int since in Python a bool is an int. Anything else is UNDEFINED.
        """
        if isinstance(value, bool):
            return OptionType.BOOLEAN
        elif isinstance(value, int):
            return OptionType.INTEGER
        elif isinstance(value, float):
            return OptionType.FLOAT
        elif isinstance(value, str):
            return OptionType.STRING
        return OptionType.UNDEFINED

    @staticmethod
    def from_type(native_type: Optional[Type]) -> OptionType:
        if native_type is bool:
            return OptionType.BOOLEAN
        elif native_type is int:
            return OptionType.INTEGER
        elif native_type is float:
            return OptionType.FLOAT
        elif native_type is str:
            return OptionType.STRING
        return OptionType.UNDEFINED

    @property
    def native_type(self) -> Optional[Type]:
        return _NATIVE_TYPES.get(self)

    @property
    def converter(self) -> Optional[Callable]:
        return _CONVERTERS.get(self)


class ParsingMode(Enum):

    # With DEFAULT a bare -- is ignored; with POSITIONAL_ARGUMENTS everything
    # after the first bare -- is collected verbatim as a positional argument.
    DEFAULT = "DefaultParsingMode"
    POSITIONAL_ARGUMENTS = "PositionalArgumentsMode"

    def __str__(self) -> str:
        return self.value


_NATIVE_TYPES = {
    OptionType.BOOLEAN: bool,
    OptionType.INTEGER: int,
    OptionType.FLOAT: float,
    OptionType.STRING: str
}

_CONVERTERS = {
    OptionType.BOOLEAN: to_boolean,
    OptionType.INTEGER: to_integer,
    OptionType.FLOAT: to_float,
    OptionType.STRING: to_string
}
