from __future__ import annotations
from typing import Callable, List, Optional
from prettytable import PrettyTable
from argv_utils.chars import chars
from argv_utils.option import Option
from argv_utils.option_registry import OptionRegistry
from argv_utils.terminal_utils import highlight_color, terminal_color


class ArgvOutput:

    @staticmethod
    def help_text(registry: OptionRegistry, program_name: Optional[str] = None) -> str:
        """
        Returns the help text for all registered options, one line per option, in
        registration order, with the flags right aligned and the argument texts padded
        so that all the help sentences start in the same column, e.g.:

            myprogram [OPTIONS]:
                -v/--version                 print-out application version.
                   -h/--help                 print-out help menu.
                -V/--verbose <log verbosity> set verbosity text.
        """
        help_text = f"{program_name} [OPTIONS]:\n" if program_name else ""
        max_flags_length = registry.max_flags_length
        max_arg_text_length = registry.max_arg_text_length
        for option in registry:
            help_text += f"\t{ArgvOutput.option_help_text(option, max_flags_length, max_arg_text_length)}"
        return help_text

    @staticmethod
    def option_help_text(option: Option, max_flags_length: int, max_arg_text_length: int) -> str:
        if arg_text := option.arg_text:
            fill = " " * (max_arg_text_length - len(arg_text))
            return f"{option.flags:>{max_flags_length}} <{arg_text}>{fill} {option.help_text}.\n"
        fill = " " * (max_arg_text_length + 2)
        return f"{option.flags:>{max_flags_length}} {fill} {option.help_text}.\n"

    @staticmethod
    def print_options(registry: OptionRegistry,
                      remaining_args: Optional[List[str]] = None,
                      positional_args: Optional[List[str]] = None,
                      printf: Optional[Callable] = None,
                      nocolor: bool = False,
                      string: bool = False) -> Optional[str]:
        table = PrettyTable()
        table.field_names = ["FLAGS", "TYPE", "MANDATORY", "VALUES"]
        table.align = "l"
        for option in registry:
            if option.is_set:
                values = ", ".join(option.values)
            elif option.mandatory:
                values = terminal_color(chars.xmark, "red", nocolor=nocolor)
            else:
                values = chars.null
            table.add_row([highlight_color(option.flags, nocolor=nocolor), option.type.name,
                           chars.check if option.mandatory else "", values])
        lines = [table.get_string()]
        if remaining_args:
            lines.append(f"{chars.rarrow} remaining: {' '.join(remaining_args)}")
        if positional_args:
            lines.append(f"{chars.rarrow} positional: {' '.join(positional_args)}")
        output = "\n".join(lines)
        if string is True:
            return output
        if not callable(printf):
            printf = print
        printf(output)
        return None
