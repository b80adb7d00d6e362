from __future__ import annotations
from typing import List, Optional
from argv_utils.errors import DEFAULT_MESSAGES, ErrorKind, ErrorMessages
from argv_utils.option import LONG_OPTION_PREFIX, SHORT_OPTION_PREFIX, Option
from argv_utils.option_registry import OptionRegistry
from argv_utils.option_type import OptionType, ParsingMode

ESCAPE_OPTION = "--"
OPTION_ASSIGN = "="
BOOLEAN_TRUE = "true"


class ArgvScanner:
    """
    Walks the given command-line arguments (program name already removed) left to right,
    binding option values into the options of the given registry, and collecting the
    arguments which are not options into remaining_args, or, in positional arguments
    mode, everything after the first bare -- into positional_args. Stops (raises)
    at the first error; the mandatory option check is done by the caller afterwards.

    Recognized forms: -c value, -c=value, -xyz, -xyzf value, -xyz=value,
    --name value, --name=value, --name (boolean only), and a bare --.
    """
    def __init__(self,
                 argv: List[str],
                 registry: OptionRegistry,
                 messages: Optional[ErrorMessages] = None,
                 mode: ParsingMode = ParsingMode.DEFAULT,
                 strict: bool = False,
                 remaining_args: Optional[List[str]] = None,
                 positional_args: Optional[List[str]] = None) -> None:
        self._argv = list(argv) if isinstance(argv, (list, tuple)) else []
        self._argi = 0
        self._registry = registry
        self._messages = messages if isinstance(messages, ErrorMessages) else DEFAULT_MESSAGES
        self._mode = mode if isinstance(mode, ParsingMode) else ParsingMode.DEFAULT
        self._strict = strict is True
        self._escaping = False
        self._remaining_args = remaining_args if isinstance(remaining_args, list) else []
        self._positional_args = positional_args if isinstance(positional_args, list) else []

    def scan(self) -> None:
        while (arg := self._next) is not None:
            if self._escaping:
                self._positional_args.append(arg)
            elif arg == ESCAPE_OPTION:
                if self._mode == ParsingMode.POSITIONAL_ARGUMENTS:
                    self._escaping = True
            elif arg.startswith(LONG_OPTION_PREFIX):
                self._scan_long_option(arg)
            elif arg.startswith(SHORT_OPTION_PREFIX):
                self._scan_short_options(arg)
            else:
                self._remaining_args.append(arg)

    def _scan_long_option(self, arg: str) -> None:
        flag, assign, value = arg.partition(OPTION_ASSIGN)
        if (option := self._registry.find(flag)) is None:
            raise self._messages.error(ErrorKind.OPTION_NOT_FOUND, flags=arg, type_name=str(OptionType.UNDEFINED))
        if not assign:
            if option.type == OptionType.BOOLEAN:
                value = BOOLEAN_TRUE
            elif (value := self._next) is None:
                raise self._messages.error(ErrorKind.MISSING_OPTION_ARGUMENT, option)
        if not value:
            raise self._messages.error(ErrorKind.MISSING_OPTION_ARGUMENT, option)
        self._bind(option, value)

    def _scan_short_options(self, arg: str) -> None:
        # The cluster has a single argument: its inline =value if given, otherwise (only
        # if some non-boolean option in the cluster needs it) the next argument. It may be
        # claimed by at most one option of the cluster; a boolean option claims it only if
        # it was given inline, otherwise it gets true.
        flags, assign, inline_value = arg[len(SHORT_OPTION_PREFIX):].partition(OPTION_ASSIGN)
        inline_value = inline_value if assign else None
        value = inline_value
        claimed = False
        for flag in flags:
            if (option := self._registry.find(f"{SHORT_OPTION_PREFIX}{flag}")) is None:
                if self._strict:
                    raise self._messages.error(ErrorKind.OPTION_NOT_FOUND, flags=f"{SHORT_OPTION_PREFIX}{flag}",
                                               type_name=str(OptionType.UNDEFINED))
                continue
            if option.type == OptionType.BOOLEAN:
                if inline_value is None:
                    self._bind(option, BOOLEAN_TRUE)
                    continue
            elif value is None:
                value = self._next
            if claimed:
                raise self._messages.error(ErrorKind.OPTION_ARGUMENT_ALREADY_ASSIGNED, option)
            if not value:
                raise self._messages.error(ErrorKind.MISSING_OPTION_ARGUMENT, option)
            self._bind(option, value)
            claimed = True

    def _bind(self, option: Option, value: str) -> None:
        option.add_value(value, self._messages)

    @property
    def _peek(self) -> Optional[str]:
        return self._argv[self._argi] if self._argi < len(self._argv) else None

    @property
    def _next(self) -> Optional[str]:
        if (value := self._peek) is not None:
            self._argi += 1
        return value
