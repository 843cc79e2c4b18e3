import logging

from .ldapfilter import escape_filter_value
from .ldapdn import escape_dn_value
from .errors import *
from .utils import set_debug

__version__ = "1.0.0"

__all__ = [
    "escape_dn_value",
    "escape_filter_value",
    # Errors
    "LDAPError",
    "InvalidValue",
    # Util functions
    "set_debug",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
