# spimem

An asyncio driver for 25-series SPI flash and EEPROM chips.

The driver speaks the common 25-series command set: JEDEC ID, status
register, read, page program, and sector, block and chip erase. It does not
talk to hardware itself. You supply an object implementing
`spimem.interfaces.SpiDevice` (the bus) and one implementing
`spimem.interfaces.Delay` (a microsecond wait). Any SPI backend works, and so
does a simulated chip in tests.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import asyncio

from spimem.interfaces import Delay
from spimem.series25 import Flash, FlashParameters

PARAMS = FlashParameters(
    page_size=256,
    sector_size=4096,
    block_size=65536,
    chip_size=2 * 1024 * 1024,
)


class AsyncioDelay(Delay):
    async def delay_us(self, us):
        await asyncio.sleep(us / 1_000_000)


async def run(spi):
    # Polls the status register until any operation in progress has finished.
    flash = await Flash.init(spi, AsyncioDelay(), 100, PARAMS)

    ident = await flash.read_jedec_id()
    print(hex(ident.mfr_code()), ident.device_id().hex(), ident.continuation_count())

    await flash.erase_sector(0)
    await flash.write_bytes(0, b"hello")
    data = await flash.read(0, 5)
```

### The SPI device

`spi` is an implementation of `spimem.interfaces.SpiDevice` with three
coroutine methods:

- `transfer_in_place(data)` clocks out `data` and returns the bytes clocked
  in, of the same length.
- `write(data)` clocks out `data` and discards what comes back.
- `transaction(operations)` runs a list of `spimem.series25.WriteOperation`
  (with `data`) and `spimem.series25.ReadOperation` (with `length`) items
  under one chip select, and returns a list with the bytes read by each read
  operation, in order.

Any exception raised by these methods reaches the caller as
`spimem.errors.SpiError`, with the original exception in its `cause`
attribute.

## API summary

`spimem.series25`:

- `Flash` – the driver. `Flash.init(spi, delay, poll_delay_us, params)`
  creates it and waits until the chip is not busy.
  - `read_jedec_id()` returns an `Identification`.
  - `read_status()` returns a `Status` flag value (`BUSY`, `WEL`, `PROT`,
    `SRWD`); unknown bits are dropped.
  - `wait_done()` polls the status register, waiting `poll_delay_us`
    between polls, until `BUSY` clears.
  - `read(addr, length)` returns `length` bytes from `addr`.
  - `write_bytes(addr, data)` programs at most one page: `data` is cut to
    `page_write_size()` bytes. Nothing is erased first.
  - `erase_sector(addr)`, `erase_block(addr)`, `erase_all()` send a write
    enable, the erase command, and then wait until the chip is done.
  - `erase_range(start_address, end_address)` requires both addresses to be
    multiples of the sector size (else `NotAlignedError`) and
    `start_address <= end_address` (else `OutOfBoundsError`). It then calls
    `erase_sector` once for each sector number `n` in
    `[start_address // sector_size, end_address // sector_size)`, passing
    the sector number `n` itself as the address.
  - `page_write_size()`, `sector_erase_size()`, `block_erase_size()`,
    `chip_size()` and `capacity()` return the sizes from the
    `FlashParameters`.
  - `read`, `write(offset, data)` and `erase(start, end)` are the generic
    NOR-flash names; `write` and `erase` delegate to `write_bytes` and
    `erase_range`. `READ_SIZE` and `WRITE_SIZE` are both 1.
- `FlashParameters(page_size, sector_size, block_size, chip_size)` – chip
  sizes in bytes.
- `Identification` – built by `Identification.from_jedec_id(buf)`, which
  skips leading `0x7F` continuation codes. `mfr_code()`, `device_id()` and
  `continuation_count()` give its parts; its repr shows the three ID bytes in
  hex.
- `Opcode` – the command opcodes.
- `hex_slice(data)` – formats bytes as `[c2, 22, 08]`.

Addresses are sent as 24 bits, so at most 16 MiB can be addressed.

`spimem.errors`: every driver error is a `FlashError`; the subclasses are
`NotAlignedError`, `OutOfBoundsError`, `SpiError` and
`UnexpectedStatusError`. `kind()` returns a `NorFlashErrorKind`
(`NOT_ALIGNED`, `OUT_OF_BOUNDS` or `OTHER`).

`spimem.interfaces` also defines the abstract `Read` and `BlockDevice`
interfaces, for code that should work with any memory chip.

## What it does not do

The package ships no SPI backend and no command-line tool. Connecting to a
real chip means writing a `SpiDevice` for your own bus hardware or library.