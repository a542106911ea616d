"""
dispatchcore: shape descriptors and call contexts for differentiable kernel dispatch.
"""

from .domain._access_type import AccessType
from .domain._call_mode import CallMode
from .domain._errors import DeviceClosedError, IndexOutOfRangeError, InvalidStateError
from .domain._shape import SYMBOLIC_DIM, Shape
from .domain.device._device import Device, DeviceType
from .domain.device._device_protocol import DeviceLike
from .domain.types._numpy import NDArrayLike
from .infrastructure._array_shapes import byte_strides, is_contiguous, shape_of
from .infrastructure._call_context import CallContext
from .infrastructure._logging import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    AccessType.__name__,
    CallMode.__name__,
    CallContext.__name__,
    Device.__name__,
    DeviceClosedError.__name__,
    DeviceLike.__name__,
    DeviceType.__name__,
    IndexOutOfRangeError.__name__,
    InvalidStateError.__name__,
    NDArrayLike.__name__,
    Shape.__name__,
    "SYMBOLIC_DIM",
    byte_strides.__name__,
    configure_logging.__name__,
    get_logger.__name__,
    is_contiguous.__name__,
    shape_of.__name__,
]
