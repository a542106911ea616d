"""
Call-mode tags for differentiable dispatches.

A kernel dispatch evaluates exactly one variant of a differentiable
computation. `CallMode` names that variant so dispatch logic can select the
matching entry point without inspecting the kernel itself.
"""

from __future__ import annotations

from enum import Enum


class CallMode(Enum):
    """
    Enumeration of computation variants a dispatch can target.

    Each member's value is its canonical lowercase name, used for logging and
    introspection by external callers.

    Attributes
    ----------
    prim : CallMode
        Primal evaluation of the function.
    bwds : CallMode
        Reverse-mode derivative (backward) pass.
    fwds : CallMode
        Forward-mode derivative pass.
    """

    prim = "prim"
    bwds = "bwds"
    fwds = "fwds"

    def __str__(self) -> str:
        return self.value

    @property
    def ordinal(self) -> int:
        """
        Return the declaration index of the mode (prim=0, bwds=1, fwds=2).

        Returns
        -------
        int
            Zero-based position of the member in declaration order.
        """
        return list(CallMode).index(self)

    @classmethod
    def from_name(cls, name: str) -> "CallMode":
        """
        Look up a call mode by its canonical name.

        Parameters
        ----------
        name : str
            One of "prim", "bwds" or "fwds".

        Returns
        -------
        CallMode
            The matching member.

        Raises
        ------
        ValueError
            If `name` is not a known call mode.
        """
        try:
            return cls(name)
        except ValueError:
            names = ", ".join(repr(m.value) for m in cls)
            raise ValueError(
                f"Invalid call mode {name!r}. Expected one of {names}"
            ) from None
