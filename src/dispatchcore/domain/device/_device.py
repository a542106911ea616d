"""
Compute device handles.

This module defines lightweight handles for the compute devices a dispatch
targets. It provides:

- `DeviceType`: an enumeration of supported device backends
- `Device`: a shared handle that validates and normalizes user-facing device
  strings such as "cpu", "cuda:0" or "vulkan:1", and tracks whether the
  device has been closed

Handles are shared by reference: any number of call contexts may hold the
same `Device`, and none of them owns it. Creating and tearing down the
underlying backend resources is left to the code that owns the handle.
"""

from __future__ import annotations

import re
from enum import Enum


class DeviceType(Enum):
    """
    Enumeration of supported device backends.

    Attributes
    ----------
    CPU : DeviceType
        Host execution.
    CUDA : DeviceType
        NVIDIA CUDA.
    VULKAN : DeviceType
        Vulkan compute.
    D3D12 : DeviceType
        Direct3D 12 compute.
    METAL : DeviceType
        Apple Metal compute.
    """

    CPU = "cpu"
    CUDA = "cuda"
    VULKAN = "vulkan"
    D3D12 = "d3d12"
    METAL = "metal"


class Device:
    """
    Shared compute device handle.

    Parameters
    ----------
    device : str
        Device identifier string. Must be either:
        - "cpu"
        - "<backend>:<index>", where <backend> is one of "cuda", "vulkan",
          "d3d12", "metal" and <index> is a non-negative integer

    Raises
    ------
    ValueError
        If the provided device string does not match the supported formats.

    Notes
    -----
    - Equality and hashing use `(type, index)` only, so two handles naming
      the same device compare equal regardless of their `closed` state.
    - `close()` only flips the handle's state; it releases nothing.
    """

    __slots__ = ("type", "index", "_closed")

    _GPU_PATTERN = re.compile(r"^(cuda|vulkan|d3d12|metal):(\d+)$")

    def __init__(self, device: str):
        if device == "cpu":
            self.type = DeviceType.CPU
            self.index = None
        else:
            m = self._GPU_PATTERN.match(device)
            if not m:
                raise ValueError(
                    f"Invalid device '{device}'. Expected 'cpu' or "
                    "'<cuda|vulkan|d3d12|metal>:<index>'"
                )
            self.type = DeviceType(m.group(1))
            self.index = int(m.group(2))
        self._closed = False

    def __str__(self) -> str:
        """
        Return the canonical string representation of the device.

        Returns
        -------
        str
            "cpu" for the host, or "<backend>:<index>" for GPU devices.
        """
        if self.type is DeviceType.CPU:
            return "cpu"
        return f"{self.type.value}:{self.index}"

    def __repr__(self) -> str:
        return f"Device('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Device):
            return NotImplemented
        return (self.type, self.index) == (other.type, other.index)

    def __hash__(self) -> int:
        return hash((self.type, self.index))

    @property
    def closed(self) -> bool:
        """Return True once `close()` has been called."""
        return self._closed

    def close(self) -> None:
        """
        Mark the handle as closed.

        Contexts can no longer be built on a closed device. Closing twice is
        a no-op.
        """
        self._closed = True

    def is_cpu(self) -> bool:
        """
        Check whether this device represents the host CPU.

        Returns
        -------
        bool
            True if the device type is CPU, False otherwise.
        """
        return self.type is DeviceType.CPU

    def is_gpu(self) -> bool:
        """
        Check whether this device represents a GPU backend.

        Returns
        -------
        bool
            True for any non-CPU device type, False otherwise.
        """
        return self.type is not DeviceType.CPU
