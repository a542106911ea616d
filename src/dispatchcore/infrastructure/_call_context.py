"""
Per-dispatch call context.

A `CallContext` bundles the three facts every stage of a dispatch pipeline
needs: which device the kernel runs on, the call shape it is broadcast over,
and which variant of the differentiable computation it evaluates.
"""

from __future__ import annotations

from typing import Any, Union

from ..domain._call_mode import CallMode
from ..domain._errors import DeviceClosedError
from ..domain._shape import Shape
from ..domain.device._device_protocol import DeviceLike
from ._logging import get_logger

logger = get_logger(__name__)


def _is_closed(device: Any) -> bool:
    # Only a boolean `closed` attribute marks a handle as closed; foreign
    # handles may expose `closed` as a method or not at all.
    closed = getattr(device, "closed", False)
    return isinstance(closed, bool) and closed


class CallContext:
    """
    Immutable context threaded through a single kernel dispatch.

    Parameters
    ----------
    device : DeviceLike | Any
        Shared handle to the device the dispatch targets, typically a
        `Device` or another `DeviceLike`. Any other object is accepted as an
        opaque handle. The context references it and never manages its
        lifetime.
    call_shape : Shape
        Iteration extent over which the dispatch is broadcast. May be
        invalid.
    call_mode : CallMode
        Computation variant evaluated by the dispatch.

    Raises
    ------
    TypeError
        If `device` is None, `call_shape` is not a `Shape`, or `call_mode`
        is not a `CallMode`.
    DeviceClosedError
        If `device` reports itself as closed.

    Notes
    -----
    - The context keeps a private copy of the call shape, and `call_shape`
      returns a fresh copy on every access, so neither the caller's shape
      nor a returned shape can change the context.
    - Contexts compare by identity: each one belongs to exactly one dispatch.
    """

    __slots__ = ("_device", "_call_shape", "_call_mode")

    def __init__(
        self,
        device: Union[DeviceLike, Any],
        call_shape: Shape,
        call_mode: CallMode,
    ) -> None:
        if device is None:
            raise TypeError("CallContext requires a device handle, got None")
        if _is_closed(device):
            raise DeviceClosedError(str(device))
        if not isinstance(call_shape, Shape):
            raise TypeError(
                "CallContext call_shape must be a Shape, "
                f"got {type(call_shape).__name__}"
            )
        if not isinstance(call_mode, CallMode):
            raise TypeError(
                "CallContext call_mode must be a CallMode, "
                f"got {type(call_mode).__name__}"
            )

        self._device = device
        self._call_shape = call_shape.copy()
        self._call_mode = call_mode

        logger.debug(
            "Created call context: device=%s call_shape=%s call_mode=%s",
            device,
            self._call_shape,
            call_mode,
        )

    @property
    def device(self) -> Union[DeviceLike, Any]:
        """Return the device handle exactly as it was passed in."""
        return self._device

    @property
    def call_shape(self) -> Shape:
        """
        Return the call shape.

        Returns
        -------
        Shape
            A copy of the stored shape. Mutating it leaves the context
            unchanged.
        """
        return self._call_shape.copy()

    @property
    def call_mode(self) -> CallMode:
        """Return the computation variant of the dispatch."""
        return self._call_mode

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_call_mode"):
            raise AttributeError(f"CallContext is immutable (cannot set {name!r})")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return (
            f"CallContext(device={self._device!r}, "
            f"call_shape={self._call_shape!r}, "
            f"call_mode={self._call_mode})"
        )
