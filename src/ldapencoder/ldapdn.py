from typing import List, Optional

from .utils import hexescape, scalar_values

# Characters that must be escaped anywhere in an attribute value
# (RFC 4514 section 2.4). Escaping '=' is optional.
_SPECIAL_CHARS = {
    "\\": "\\\\",
    ",": "\\,",
    "+": "\\+",
    '"': '\\"',
    "<": "\\<",
    ">": "\\>",
    ";": "\\;",
    "=": "\\=",
    "\0": "\\00",
}


def _escape_ascii(code: int) -> str:
    char = chr(code)
    if char in _SPECIAL_CHARS:
        return _SPECIAL_CHARS[char]
    if code < 0x20 or code == 0x7F:
        return hexescape(code)
    return char


_ESCAPED_ASCII = tuple(_escape_ascii(code) for code in range(0x80))


def escape_dn_value(value: Optional[str], errors: str = "replace") -> Optional[str]:
    """
    Escapes an attribute value of a relative distinguished name
    based on RFC 4514.

    Every leading and trailing space is escaped, just like a '#' at
    the beginning of the value (after the leading spaces), and the
    ``\\ , + " < > ; =`` characters wherever they are. Control
    characters and non-ASCII characters are written as the
    hexadecimal escapes of their UTF-8 bytes.

    Only the value is escaped, the attribute type and the separators
    of the DN are the caller's, e.g.
    ``"cn=%s,ou=users,dc=local" % escape_dn_value(name)``.

    :param str value: the unescaped attribute value, or None.
    :param str errors: how to handle unpaired surrogates, 'replace' or
        'strict'.
    :return: the escaped value, or None if `value` is None.
    :rtype: str
    :raises TypeError: if `value` is not a string.
    :raises InvalidValue: if `errors` is 'strict' and the value is not
        a valid Unicode text.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"The value must be str, not {type(value).__name__}.")
    if not value:
        return value
    value = scalar_values(value, errors)
    length = len(value)
    leading = length - len(value.lstrip(" "))
    trailing = length - len(value.rstrip(" "))
    escaped = []  # type: List[str]
    for idx, char in enumerate(value):
        if char == " " and (idx < leading or idx >= length - trailing):
            escaped.append("\\ ")
        elif char == "#" and idx == leading:
            # First character after the leading spaces (if any).
            escaped.append("\\#")
        elif char < "\x80":
            escaped.append(_ESCAPED_ASCII[ord(char)])
        else:
            escaped.extend(hexescape(byte) for byte in char.encode("utf-8"))
    return "".join(escaped)
