"""Errors raised by the flash drivers."""

from __future__ import annotations

import enum


class NorFlashErrorKind(enum.Enum):
    """Coarse classification of a flash error."""

    NOT_ALIGNED = "not_aligned"
    OUT_OF_BOUNDS = "out_of_bounds"
    OTHER = "other"


class FlashError(Exception):
    """Base class of every error raised by this library."""

    _kind = NorFlashErrorKind.OTHER
    _message = "flash error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self._message)

    def kind(self) -> NorFlashErrorKind:
        """Return the generic NOR flash error kind of this error."""
        return self._kind


class NotAlignedError(FlashError):
    """The arguments are not properly aligned."""

    _kind = NorFlashErrorKind.NOT_ALIGNED
    _message = "arguments are not properly aligned"


class OutOfBoundsError(FlashError):
    """The arguments are out of bounds."""

    _kind = NorFlashErrorKind.OUT_OF_BOUNDS
    _message = "arguments are out of bounds"


class SpiError(FlashError):
    """An SPI transfer failed; the underlying exception is kept in ``cause``."""

    _kind = NorFlashErrorKind.OTHER

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"SPI error: {cause}")
        self.cause = cause


class UnexpectedStatusError(FlashError):
    """The status register contained unexpected flags."""

    _kind = NorFlashErrorKind.OTHER
    _message = "unexpected value in status register"