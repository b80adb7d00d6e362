from __future__ import annotations
import sys
from typing import Any, Callable, Iterable, List, Optional, Type
from argv_utils.argv_output import ArgvOutput
from argv_utils.argv_scanner import OPTION_ASSIGN, ArgvScanner
from argv_utils.errors import ArgvError, ErrorKind, ErrorMessages
from argv_utils.option import SHORT_OPTION_PREFIX, Option
from argv_utils.option_registry import OptionRegistry
from argv_utils.option_type import OptionType, ParsingMode
from argv_utils.terminal_utils import error_color


class Argv:
    """
    Command-line parser. Options are declared with the add_*_option methods, each of
    which returns an int fingerprint identifying the option; the command-line is then
    parsed with parse (or parse_args/process for sys.argv); and then the values given
    for options are retrieved by fingerprint with is_set, value, and values. e.g.:

        argv = Argv()
        config = argv.add_string_option("c", "config", True, "file path", "configuration file path")
        verbose = argv.add_boolean_option("V", "verbose", help_text="verbose output")
        argv.process()
        config_file = argv.value(config)

    All errors are raised as an ArgvError; the error messages may be localized by passing
    a table of messages (in ErrorKind order) as the messages argument.
    """
    def __init__(self,
                 messages: Optional[Iterable[str]] = None,
                 mode: ParsingMode = ParsingMode.DEFAULT,
                 strict: bool = False) -> None:
        self._messages = messages if isinstance(messages, ErrorMessages) else ErrorMessages(messages)
        self._registry = OptionRegistry(self._messages)
        self._mode = mode if isinstance(mode, ParsingMode) else ParsingMode.DEFAULT
        self._strict = strict is True
        self._program_name = ""
        self._remaining_args = []
        self._positional_args = []

    def add_option(self,
                   option_type: OptionType,
                   short: Optional[str] = None,
                   long: Optional[str] = None,
                   mandatory: bool = False,
                   arg_text: str = "",
                   help_text: str = "") -> int:
        if not (isinstance(option_type, OptionType) and (option_type != OptionType.UNDEFINED)):
            raise ValueError(f"Invalid option type: {option_type}")
        if not (short or long):
            raise ValueError("Option must have a short and/or long flag")
        if short and not (isinstance(short, str) and (len(short) == 1) and
                          (short not in (SHORT_OPTION_PREFIX, OPTION_ASSIGN)) and (not short.isspace())):
            raise ValueError(f"Invalid short option flag: {short}")
        if long and not (isinstance(long, str) and (OPTION_ASSIGN not in long)):
            raise ValueError(f"Invalid long option flag: {long}")
        if option_type == OptionType.BOOLEAN:
            arg_text = ""
        return self._registry.register(Option(short=short, long=long, mandatory=mandatory,
                                              arg_text=arg_text, help_text=help_text, option_type=option_type))

    def add_boolean_option(self, short: Optional[str] = None, long: Optional[str] = None,
                           mandatory: bool = False, help_text: str = "") -> int:
        return self.add_option(OptionType.BOOLEAN, short, long, mandatory, help_text=help_text)

    def add_integer_option(self, short: Optional[str] = None, long: Optional[str] = None,
                           mandatory: bool = False, arg_text: str = "", help_text: str = "") -> int:
        return self.add_option(OptionType.INTEGER, short, long, mandatory, arg_text, help_text)

    def add_float_option(self, short: Optional[str] = None, long: Optional[str] = None,
                         mandatory: bool = False, arg_text: str = "", help_text: str = "") -> int:
        return self.add_option(OptionType.FLOAT, short, long, mandatory, arg_text, help_text)

    def add_string_option(self, short: Optional[str] = None, long: Optional[str] = None,
                          mandatory: bool = False, arg_text: str = "", help_text: str = "") -> int:
        return self.add_option(OptionType.STRING, short, long, mandatory, arg_text, help_text)

    def add_help_option(self, help_text: str = "") -> int:
        return self.add_boolean_option("h", "help", help_text=help_text)

    def add_version_option(self, help_text: str = "") -> int:
        return self.add_boolean_option("v", "version", help_text=help_text)

    @property
    def parsing_mode(self) -> ParsingMode:
        return self._mode

    def set_parsing_mode(self, mode: ParsingMode) -> None:
        if isinstance(mode, ParsingMode):
            self._mode = mode

    @property
    def program_name(self) -> str:
        return self._program_name

    @property
    def remaining_args(self) -> List[str]:
        return self._remaining_args

    @property
    def positional_args(self) -> List[str]:
        return self._positional_args

    @property
    def options(self) -> List[Option]:
        return self._registry.options

    def parse(self, argv: List[str]) -> None:
        """
        Parses the given command-line arguments, the first of which is the program name.
        Raises an ArgvError for the first problem found. Parsing again accumulates, i.e.
        option values and remaining/positional arguments are added to those already there.
        """
        argv = list(argv) if isinstance(argv, (list, tuple)) else []
        self._program_name = argv[0] if argv else ""
        ArgvScanner(argv[1:], self._registry,
                    messages=self._messages, mode=self._mode, strict=self._strict,
                    remaining_args=self._remaining_args, positional_args=self._positional_args).scan()
        self._registry.check_mandatory()

    def parse_args(self) -> None:
        self.parse(sys.argv)

    def process(self, argv: Optional[List[str]] = None,
                printf: Optional[Callable] = None, exit: bool = True, nocolor: bool = False) -> Optional[ArgvError]:
        """
        Parses the given command-line arguments (default sys.argv); on error prints the
        error and the help text to stderr and exits with status 1, or, if exit is False,
        returns the error.
        """
        try:
            self.parse(argv if isinstance(argv, (list, tuple)) else sys.argv)
        except ArgvError as error:
            if not callable(printf):
                printf = lambda *args, **kwargs: print(*args, **kwargs, file=sys.stderr)  # noqa
            printf(error_color(str(error), nocolor=nocolor))
            printf(self.help_text())
            if exit is True:
                sys.exit(1)
            return error
        return None

    def is_set(self, fingerprint: int) -> bool:
        return option.is_set if (option := self._registry.lookup(fingerprint)) else False

    def value(self, fingerprint: int, native_type: Optional[Type] = None) -> Any:
        """
        Returns the first value given for the option with the given fingerprint, converted
        to the given type (bool, int, float, or str), or by default to the type of the option.
        The type must agree with that of the option, e.g. an integer option value cannot be
        retrieved as a float or a str.
        """
        option = self._lookup(fingerprint)
        if not option.is_set:
            raise self._messages.error(ErrorKind.OPTION_NOT_SET, option)
        return self._convert(option, option.value, native_type)

    def values(self, fingerprint: int, native_type: Optional[Type] = None) -> List[Any]:
        option = self._lookup(fingerprint)
        return [self._convert(option, value, native_type) for value in option.values]

    def help_text(self) -> str:
        return ArgvOutput.help_text(self._registry, self._program_name)

    def show_help(self, printf: Optional[Callable] = None) -> None:
        if not callable(printf):
            printf = print
        printf(self.help_text())

    def dump(self, printf: Optional[Callable] = None, nocolor: bool = False) -> None:
        ArgvOutput.print_options(self._registry, self._remaining_args, self._positional_args,
                                 printf=printf, nocolor=nocolor)

    def _lookup(self, fingerprint: int) -> Option:
        if (option := self._registry.lookup(fingerprint)) is None:
            raise self._messages.error(ErrorKind.OPTION_IDENTIFIER_NOT_FOUND,
                                       flags="", type_name=str(OptionType.UNDEFINED))
        return option

    def _convert(self, option: Option, value: str, native_type: Optional[Type] = None) -> Any:
        if native_type is None:
            native_type = option.type.native_type
        if converter := OptionType.from_type(native_type).converter:
            if (((converted_value := converter(value)) is not None) and
                (OptionType.infer(converted_value) == option.type)):
                return converted_value
        raise self._messages.error(ErrorKind.OPTION_TYPE_MISMATCH, option)
