from __future__ import annotations
from typing import Dict, Iterator, List, Optional
from argv_utils.errors import DEFAULT_MESSAGES, ErrorKind, ErrorMessages
from argv_utils.option import LONG_OPTION_PREFIX, SHORT_OPTION_PREFIX, Option


class OptionRegistry:
    """
    Ordered, append-only collection of the declared options. Options are handed out to
    callers only by fingerprint (an int computed once, on registration, from the option
    identity); all later lookups go through that fingerprint or through flag text.
    """
    def __init__(self, messages: Optional[ErrorMessages] = None) -> None:
        self._messages = messages if isinstance(messages, ErrorMessages) else DEFAULT_MESSAGES
        self._options = []
        self._fingerprints = {}

    @property
    def options(self) -> List[Option]:
        return list(self._options)

    def register(self, option: Option) -> int:
        self._check_option_already_exists(option)
        fingerprint = option.fingerprint
        self._options.append(option)
        self._fingerprints[fingerprint] = option
        return fingerprint

    def find(self, flag: str) -> Optional[Option]:
        """
        Returns the option for the given flag text, e.g. --config or -c; for a short flag only
        the first character after the dash is significant (clusters are split by the scanner).
        """
        if not isinstance(flag, str):
            return None
        if flag.startswith(LONG_OPTION_PREFIX):
            if long := flag[len(LONG_OPTION_PREFIX):]:
                for option in self._options:
                    if option.long == long:
                        return option
        elif flag.startswith(SHORT_OPTION_PREFIX):
            if short := flag[len(SHORT_OPTION_PREFIX):len(SHORT_OPTION_PREFIX) + 1]:
                for option in self._options:
                    if option.short == short:
                        return option
        return None

    def lookup(self, fingerprint: int) -> Optional[Option]:
        return self._fingerprints.get(fingerprint) if isinstance(fingerprint, int) else None

    def check_mandatory(self) -> None:
        for option in self._options:
            if option.mandatory and not option.is_set:
                raise self._messages.error(ErrorKind.MANDATORY_OPTION_NOT_SET, option)

    @property
    def max_flags_length(self) -> int:
        return max((len(option.flags) for option in self._options), default=0)

    @property
    def max_arg_text_length(self) -> int:
        return max((len(option.arg_text) for option in self._options), default=0)

    def _check_option_already_exists(self, option_to_check: Option) -> None:
        # The error refers to the already registered option, not the one being added.
        for option in self._options:
            if option_to_check == option:
                raise self._messages.error(ErrorKind.OPTION_ALREADY_EXISTS, option)
            if option_to_check.short and (option_to_check.short == option.short):
                raise self._messages.error(ErrorKind.SHORT_OPTION_ALREADY_EXISTS, option)
            if option_to_check.long and (option_to_check.long == option.long):
                raise self._messages.error(ErrorKind.LONG_OPTION_ALREADY_EXISTS, option)

    def as_dict(self) -> Dict[str, List[str]]:
        return {option.flags: option.values for option in self._options}

    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options))

    def __len__(self) -> int:
        return len(self._options)
