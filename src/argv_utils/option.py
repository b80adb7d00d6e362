from __future__ import annotations
import hashlib
from typing import List, Optional
from argv_utils.errors import DEFAULT_MESSAGES, ErrorKind, ErrorMessages
from argv_utils.option_type import OptionType
from argv_utils.type_utils import is_boolean, is_float, is_integer

SHORT_OPTION_PREFIX = "-"
LONG_OPTION_PREFIX = "--"
FLAGS_SEPARATOR = "/"


class Option:
    """
    A single declared command-line option: its identity (short and/or long flag),
    its type, whether it is mandatory, its help metadata, and the (raw string)
    values bound to it by parsing, in the order they were given on the command line.
    The identity is fixed at creation; only the values change, and only by parsing.
    """
    def __init__(self,
                 short: Optional[str] = None,
                 long: Optional[str] = None,
                 mandatory: bool = False,
                 arg_text: str = "",
                 help_text: str = "",
                 option_type: OptionType = OptionType.UNDEFINED) -> None:
        self._short = short if isinstance(short, str) and short else None
        self._long = long if isinstance(long, str) and long else None
        self._mandatory = mandatory is True
        self._arg_text = arg_text if isinstance(arg_text, str) else ""
        self._help_text = help_text if isinstance(help_text, str) else ""
        self._type = option_type if isinstance(option_type, OptionType) else OptionType.UNDEFINED
        self._values = []

    @property
    def short(self) -> Optional[str]:
        return self._short

    @property
    def long(self) -> Optional[str]:
        return self._long

    @property
    def mandatory(self) -> bool:
        return self._mandatory

    @property
    def arg_text(self) -> str:
        return self._arg_text

    @property
    def help_text(self) -> str:
        return self._help_text

    @property
    def type(self) -> OptionType:
        return self._type

    @property
    def type_name(self) -> str:
        return str(self._type)

    @property
    def flags(self) -> str:
        flags = []
        if self._short:
            flags.append(f"{SHORT_OPTION_PREFIX}{self._short}")
        if self._long:
            flags.append(f"{LONG_OPTION_PREFIX}{self._long}")
        return FLAGS_SEPARATOR.join(flags)

    @property
    def fingerprint(self) -> int:
        return Option.compute_fingerprint(self._type, self._short, self._long)

    @staticmethod
    def compute_fingerprint(option_type: OptionType, short: Optional[str], long: Optional[str]) -> int:
        # Deterministic across processes (unlike hash() of a str).
        identity = f"{option_type.name}\0{short or ''}\0{long or ''}".encode("utf-8")
        return int(hashlib.sha1(identity).hexdigest()[:16], 16)

    @property
    def is_set(self) -> bool:
        return len(self._values) > 0

    @property
    def value(self) -> Optional[str]:
        return self._values[0] if self._values else None

    @property
    def values(self) -> List[str]:
        return list(self._values)

    def add_value(self, value: str, messages: Optional[ErrorMessages] = None) -> None:
        """
        Appends the given raw value to this option, after checking that it does not look like
        a value of some other (more specific) type; the look of the value is decided by trying,
        in order, boolean, integer, and then floating point; the first that parses wins.
        A string option accepts anything; a floating point option also accepts integer text.
        """
        if not isinstance(messages, ErrorMessages):
            messages = DEFAULT_MESSAGES
        if self._type == OptionType.UNDEFINED:
            raise messages.error(ErrorKind.OPTION_TYPE_UNDEFINED, self)
        if self._type != OptionType.STRING:
            if is_boolean(value):
                if self._type != OptionType.BOOLEAN:
                    raise messages.error(ErrorKind.BOOLEAN_VALUE_MISMATCH, self)
            elif is_integer(value):
                if self._type not in (OptionType.INTEGER, OptionType.FLOAT):
                    raise messages.error(ErrorKind.INTEGER_VALUE_MISMATCH, self)
            elif is_float(value):
                if self._type != OptionType.FLOAT:
                    raise messages.error(ErrorKind.FLOAT_VALUE_MISMATCH, self)
        self._values.append(value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return (self._type == other._type) and (self._short == other._short) and (self._long == other._long)

    def __hash__(self) -> int:
        return hash((self._short, self._long))

    def __repr__(self) -> str:
        return f"Option({self.flags or '?'}, {self._type.name}, values={self._values!r})"
