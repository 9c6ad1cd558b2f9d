"""Abstract interfaces for SPI buses, delays and memory devices."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class SpiDevice(ABC):
    """An SPI device with its own chip select, driven asynchronously."""

    @abstractmethod
    async def transfer_in_place(self, data: bytes) -> bytes:
        """Clock out ``data`` and return the bytes clocked in, of equal length."""

    @abstractmethod
    async def write(self, data: bytes) -> None:
        """Clock out ``data``, discarding what is read back."""

    @abstractmethod
    async def transaction(self, operations: Sequence[Any]) -> list[bytes]:
        """Run operations under one chip select.

        Returns the bytes read by each read operation, in order.
        """


class Delay(ABC):
    """An asynchronous delay provider."""

    @abstractmethod
    async def delay_us(self, us: int) -> None:
        """Wait for ``us`` microseconds."""


class Read(ABC):
    """Reading operations on a memory chip."""

    @abstractmethod
    async def read(self, addr: int, length: int) -> bytes:
        """Read ``length`` bytes starting at ``addr``."""


class BlockDevice(ABC):
    """Writing and erasing operations on a memory chip."""

    @abstractmethod
    async def erase_sectors(self, addr: int, amount: int) -> None:
        """Erase ``amount`` sectors starting at ``addr``."""

    @abstractmethod
    async def erase_all(self) -> None:
        """Erase the whole chip."""

    @abstractmethod
    async def write_bytes(self, addr: int, data: bytes) -> None:
        """Write ``data`` at ``addr``; the target must already be erased."""