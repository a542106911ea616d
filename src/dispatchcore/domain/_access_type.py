"""
Access-intent tags for bound kernel parameters.

`AccessType` describes how a dispatch will touch a parameter. It is a pure
descriptor: barrier insertion and binding decisions are made by the code that
consumes these tags.
"""

from __future__ import annotations

from enum import Enum


class AccessType(Enum):
    """
    Enumeration of parameter access intents.

    Conceptually `none` sits below `read` and `write`, which both sit below
    `readwrite`. No combination logic is defined here.

    Attributes
    ----------
    none : AccessType
        The parameter is not accessed.
    read : AccessType
        The parameter is only read.
    write : AccessType
        The parameter is only written.
    readwrite : AccessType
        The parameter is both read and written.
    """

    none = "none"
    read = "read"
    write = "write"
    readwrite = "readwrite"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "AccessType":
        """
        Look up an access type by its canonical name.

        Raises
        ------
        ValueError
            If `name` is not a known access type.
        """
        try:
            return cls(name)
        except ValueError:
            names = ", ".join(repr(m.value) for m in cls)
            raise ValueError(
                f"Invalid access type {name!r}. Expected one of {names}"
            ) from None
