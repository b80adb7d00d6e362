from typing import Optional
from termcolor import colored


def terminal_color(value: str,
                   color: Optional[str] = None,
                   bold: bool = False,
                   dark: bool = False,
                   underline: bool = False,
                   nocolor: bool = False) -> str:
    if (nocolor is True) or (not value):
        return value
    attributes = [attribute for attribute, enabled in (("bold", bold), ("dark", dark), ("underline", underline))
                  if enabled is True]
    return colored(value, color.lower() if isinstance(color, str) and color else None, attrs=attributes or None)


def error_color(value: str, nocolor: bool = False) -> str:
    return terminal_color(value, "red", bold=True, nocolor=nocolor)


def highlight_color(value: str, nocolor: bool = False) -> str:
    return terminal_color(value, "cyan", nocolor=nocolor)
