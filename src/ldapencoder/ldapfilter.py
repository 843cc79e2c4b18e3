from typing import Optional

from .utils import hexescape, scalar_values

# RFC 4515 requires escaping the first five, the solidus is escaped
# on top of them.
_SPECIAL_BYTES = {
    0x5C: "\\5c",  # \
    0x2A: "\\2a",  # *
    0x28: "\\28",  # (
    0x29: "\\29",  # )
    0x00: "\\00",  # NUL
    0x2F: "\\2f",  # /
}


def _escape_byte(byte: int) -> str:
    if byte in _SPECIAL_BYTES:
        return _SPECIAL_BYTES[byte]
    if byte < 0x20 or byte >= 0x7F:
        # Control characters and the bytes of multibyte UTF-8 sequences.
        return hexescape(byte)
    return chr(byte)


_ESCAPED_BYTES = tuple(_escape_byte(byte) for byte in range(256))


def escape_filter_value(value: Optional[str], errors: str = "replace") -> Optional[str]:
    """
    Escapes an assertion value of an LDAP search filter based on
    RFC 4515. The value is encoded to UTF-8 and escaped byte by byte:
    the backslash, asterisk, parentheses, NUL and solidus are always
    escaped, as are the control characters and every non-ASCII byte.
    All escaped bytes are written as a backslash and two lowercase
    hexadecimal digits.

    Only the value is escaped, the filter's own syntax must be kept
    out of it, e.g. ``"(uid=%s)" % escape_filter_value(name)``.

    :param str value: the unescaped assertion value, or None.
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
    data = scalar_values(value, errors).encode("utf-8")
    return "".join([_ESCAPED_BYTES[byte] for byte in data])
