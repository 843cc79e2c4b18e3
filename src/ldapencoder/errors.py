from typing import Optional


class LDAPError(Exception):
    """General LDAP error."""

    code = 0

    @property
    def hexcode(self) -> int:
        """ Error code in 16 bit length hexadecimal format. """
        return (self.code + (1 << 16)) % (1 << 16)

    def __str__(self) -> str:
        return "{} (0x{:04X} [{:d}])".format(
            self.args[0] if self.args else "", self.hexcode, self.code
        )


class InvalidValue(LDAPError, ValueError):
    """
    Raised, when a value cannot be escaped in strict mode, because it is
    not a valid Unicode text (it contains an unpaired surrogate).

    :param str msg: the error message.
    :param int position: the index of the first offending character.
    """

    code = 0x15
    _dflt_args = ("Value is not a valid Unicode text.",)

    def __init__(self, msg: Optional[str] = None, position: int = -1) -> None:
        super().__init__(msg)
        self.args = self._dflt_args if msg is None else (msg,)
        self.position = position
