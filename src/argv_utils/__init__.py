from argv_utils.argv import Argv  # noqa
from argv_utils.errors import ArgvError, DEFAULT_ERROR_MESSAGES, ERROR_MESSAGE_COUNT, ErrorKind, ErrorMessages  # noqa
from argv_utils.option_type import OptionType, ParsingMode  # noqa
