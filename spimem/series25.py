"""Driver for 25-series SPI flash and EEPROM chips."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field

from spimem.errors import NotAlignedError, OutOfBoundsError, SpiError
from spimem.interfaces import Delay, SpiDevice

_CONTINUATION_CODE = 0x7F
_JEDEC_READ_LENGTH = 12


def hex_slice(data: Iterable[int]) -> str:
    """Format bytes as a bracketed list of two-digit hex values."""
    return "[" + ", ".join(f"{byte:02x}" for byte in data) + "]"


@dataclass(frozen=True)
class Identification:
    """3-byte JEDEC manufacturer and device identification."""

    raw: bytes
    continuations: int = 0

    @classmethod
    def from_jedec_id(cls, buf: bytes) -> Identification:
        """Build an identification from JEDEC ID bytes, skipping continuation codes."""
        buf = bytes(buf)
        if len(buf) < 3:
            raise ValueError("a JEDEC identification needs at least 3 bytes")
        start = next(
            (i for i, byte in enumerate(buf[:-2]) if byte != _CONTINUATION_CODE), 0
        )
        return cls(raw=buf[start : start + 3], continuations=start)

    def mfr_code(self) -> int:
        """The JEDEC manufacturer code."""
        return self.raw[0]

    def device_id(self) -> bytes:
        """The manufacturer-specific device ID."""
        return self.raw[1:]

    def continuation_count(self) -> int:
        """Number of continuation codes preceding the manufacturer code."""
        return self.continuations

    def __repr__(self) -> str:
        return f"Identification({hex_slice(self.raw)})"


class Opcode(enum.IntEnum):
    """Command opcodes of 25-series chips."""

    READ_DEVICE_ID = 0xAB
    READ_MF_D_ID = 0x90
    READ_JEDEC_ID = 0x9F
    WRITE_ENABLE = 0x06
    WRITE_DISABLE = 0x04
    READ_STATUS = 0x05
    WRITE_STATUS = 0x01
    READ = 0x03
    PAGE_PROG = 0x02
    SECTOR_ERASE = 0x20
    BLOCK_ERASE = 0xD8
    CHIP_ERASE = 0xC7


class Status(enum.IntFlag):
    """Status register bits."""

    BUSY = 1 << 0
    WEL = 1 << 1
    PROT = 0b0001_1100
    SRWD = 1 << 7

    @classmethod
    def from_bits_truncate(cls, bits: int) -> Status:
        """Build a status from a register value, dropping unknown bits."""
        mask = 0
        for member in cls.__members__.values():
            mask |= member.value
        return cls(bits & mask)


@dataclass(frozen=True)
class FlashParameters:
    """Sizes of a flash chip, in bytes."""

    page_size: int
    sector_size: int
    block_size: int
    chip_size: int


@dataclass(frozen=True)
class WriteOperation:
    """Transaction step that clocks out bytes."""

    data: bytes


@dataclass(frozen=True)
class ReadOperation:
    """Transaction step that clocks in ``length`` bytes."""

    length: int


def _addressed(opcode: Opcode, addr: int) -> bytes:
    return bytes([opcode, (addr >> 16) & 0xFF, (addr >> 8) & 0xFF, addr & 0xFF])


@dataclass
class Flash:
    """Driver for 25-series SPI flash chips."""

    READ_SIZE = 1
    WRITE_SIZE = 1

    spi: SpiDevice
    delay: Delay
    poll_delay_us: int
    params: FlashParameters = field(repr=True)

    @classmethod
    async def init(
        cls,
        spi: SpiDevice,
        delay: Delay,
        poll_delay_us: int,
        params: FlashParameters,
    ) -> Flash:
        """Create a driver, waiting for any operation still in progress."""
        flash = cls(spi, delay, poll_delay_us, params)
        await flash.wait_done()
        return flash

    def page_write_size(self) -> int:
        return self.params.page_size

    def sector_erase_size(self) -> int:
        return self.params.sector_size

    def block_erase_size(self) -> int:
        return self.params.block_size

    def chip_size(self) -> int:
        return self.params.chip_size

    def capacity(self) -> int:
        return self.params.chip_size

    async def _transfer(self, data: bytes) -> bytes:
        try:
            return bytes(await self.spi.transfer_in_place(data))
        except Exception as exc:
            raise SpiError(exc) from exc

    async def _write(self, data: bytes) -> None:
        try:
            await self.spi.write(data)
        except Exception as exc:
            raise SpiError(exc) from exc

    async def _transaction(self, operations: list) -> list[bytes]:
        try:
            return list(await self.spi.transaction(operations))
        except Exception as exc:
            raise SpiError(exc) from exc

    async def read_jedec_id(self) -> Identification:
        """Read the JEDEC manufacturer/device identification."""
        request = bytes([Opcode.READ_JEDEC_ID]) + bytes(_JEDEC_READ_LENGTH - 1)
        response = await self._transfer(request)
        return Identification.from_jedec_id(response[1:])

    async def read_status(self) -> Status:
        """Read the status register."""
        response = await self._transfer(bytes([Opcode.READ_STATUS, 0]))
        return Status.from_bits_truncate(response[1])

    async def _write_enable(self) -> None:
        await self._write(bytes([Opcode.WRITE_ENABLE]))

    async def wait_done(self) -> None:
        """Poll the status register until the chip is no longer busy."""
        while Status.BUSY in await self.read_status():
            await self.delay.delay_us(self.poll_delay_us)

    async def read(self, addr: int, length: int) -> bytes:
        """Read ``length`` bytes starting at the 24-bit address ``addr``."""
        results = await self._transaction(
            [WriteOperation(_addressed(Opcode.READ, addr)), ReadOperation(length)]
        )
        return bytes(results[0])

    async def erase_sector(self, addr: int) -> None:
        """Erase the sector containing ``addr``."""
        await self._write_enable()
        await self._write(_addressed(Opcode.SECTOR_ERASE, addr))
        await self.wait_done()

    async def erase_block(self, addr: int) -> None:
        """Erase the block containing ``addr``."""
        await self._write_enable()
        await self._write(_addressed(Opcode.BLOCK_ERASE, addr))
        await self.wait_done()

    async def write_bytes(self, addr: int, data: bytes) -> None:
        """Program at most one page of ``data`` at ``addr``; no erasing is done."""
        await self._write_enable()
        await self._transaction(
            [
                WriteOperation(_addressed(Opcode.PAGE_PROG, addr)),
                WriteOperation(bytes(data[: self.params.page_size])),
            ]
        )
        await self.wait_done()

    async def erase_all(self) -> None:
        """Erase the whole chip."""
        await self._write_enable()
        await self._write(bytes([Opcode.CHIP_ERASE]))
        await self.wait_done()

    async def erase_range(self, start_address: int, end_address: int) -> None:
        """Erase the sectors in ``[start_address, end_address)``; both sector aligned."""
        await self._write_enable()
        sector_size = self.params.sector_size
        if start_address % sector_size or end_address % sector_size:
            raise NotAlignedError()
        if start_address > end_address:
            raise OutOfBoundsError()
        for sector in range(start_address // sector_size, end_address // sector_size):
            await self.erase_sector(sector)

    async def erase(self, start: int, end: int) -> None:
        await self.erase_range(start, end)

    async def write(self, offset: int, data: bytes) -> None:
        await self.write_bytes(offset, data)