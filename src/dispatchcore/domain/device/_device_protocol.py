"""
Device abstraction contracts for dispatchcore.

This module defines a duck-typed `DeviceLike` protocol that represents a
compute device handle without coupling to the concrete `Device` class.

Dispatch pipelines usually bring their own device objects. Typing against
this protocol lets them pass those objects straight into a `CallContext`
while still documenting the members this package understands.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class DeviceLike(Protocol):
    """
    Duck-typed device contract.

    Any object that provides these members can be used as a device handle,
    regardless of its concrete class identity.
    """

    type: object
    index: Optional[int]

    @property
    def closed(self) -> bool: ...

    def is_cpu(self) -> bool: ...
    def is_gpu(self) -> bool: ...
    def __str__(self) -> str: ...
