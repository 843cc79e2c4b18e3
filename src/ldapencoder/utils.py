import logging
import re
from typing import Optional

from .errors import InvalidValue

_LOG = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"

_SURROGATE = re.compile("[\ud800-\udfff]")
_UNPAIRED_SURROGATE = re.compile(
    "[\ud800-\udbff](?![\udc00-\udfff])|(?<![\ud800-\udbff])[\udc00-\udfff]"
)

# Handler installed by set_debug, removed when debugging is turned off.
_debug_handler = None  # type: Optional[logging.Handler]


def hexescape(byte: int) -> str:
    """
    Return the escaped form of a single byte: a backslash followed
    by two lowercase hexadecimal digits.

    :param int byte: the byte value (0-255).
    :return: the escaped byte.
    :rtype: str
    """
    return f"\\{byte:02x}"


def scalar_values(value: str, errors: str = "replace") -> str:
    """
    Bring a string to a sequence of Unicode scalar values.

    Surrogate pairs, that a string might carry as two separate code
    points, are joined into the single character they encode. Unpaired
    surrogates are replaced with U+FFFD when `errors` is 'replace', or
    rejected when it is 'strict'.

    :param str value: the text.
    :param str errors: the error handling scheme, 'replace' or 'strict'.
    :return: the text without any surrogate code points.
    :rtype: str
    :raises InvalidValue: if `errors` is 'strict' and the text contains
        an unpaired surrogate.
    :raises ValueError: if `errors` is neither 'replace' nor 'strict'.
    """
    if errors not in ("replace", "strict"):
        raise ValueError(f"Unknown error handling scheme: '{errors}'.")
    if not _SURROGATE.search(value):
        return value
    unpaired = _UNPAIRED_SURROGATE.search(value)
    if unpaired is not None:
        if errors == "strict":
            raise InvalidValue(
                f"Unpaired surrogate at position {unpaired.start()}.",
                unpaired.start(),
            )
        _LOG.debug(
            "Replacing unpaired surrogates in a value of %d characters.", len(value)
        )
    return value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


def set_debug(debug: bool, level: int = 0) -> None:
    """
    Turn on or off the debug logging of the module. When it's on,
    the log records are written to the standard error.

    :param bool debug: turn on or off the debug logging.
    :param int level: the logging level when debugging is turned on,
        0 means `logging.DEBUG`.
    """
    global _debug_handler
    if not isinstance(debug, bool):
        raise TypeError("Parameter 'debug' must be bool.")
    if not isinstance(level, int) or isinstance(level, bool):
        raise TypeError("Parameter 'level' must be int.")
    logger = logging.getLogger("ldapencoder")
    if _debug_handler is not None:
        logger.removeHandler(_debug_handler)
        _debug_handler = None
    if debug:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level or logging.DEBUG)
        _debug_handler = handler
    else:
        logger.setLevel(logging.NOTSET)
