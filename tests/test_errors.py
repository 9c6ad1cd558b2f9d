import pytest

from spimem.errors import (
    FlashError,
    NorFlashErrorKind,
    NotAlignedError,
    OutOfBoundsError,
    SpiError,
    UnexpectedStatusError,
)


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (NotAlignedError(), NorFlashErrorKind.NOT_ALIGNED),
        (OutOfBoundsError(), NorFlashErrorKind.OUT_OF_BOUNDS),
        (SpiError(OSError("bus")), NorFlashErrorKind.OTHER),
        (UnexpectedStatusError(), NorFlashErrorKind.OTHER),
    ],
)
def test_kind(error, kind):
    assert error.kind() is kind


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (NotAlignedError(), "arguments are not properly aligned"),
        (OutOfBoundsError(), "arguments are out of bounds"),
        (UnexpectedStatusError(), "unexpected value in status register"),
    ],
)
def test_messages(error, message):
    assert str(error) == message


def test_spi_error_keeps_cause():
    cause = OSError("bus")
    error = SpiError(cause)
    assert error.cause is cause
    assert str(error) == "SPI error: bus"


def test_all_errors_share_flash_error_base():
    errors = [
        NotAlignedError(),
        OutOfBoundsError(),
        SpiError(OSError("bus")),
        UnexpectedStatusError(),
    ]
    assert all(isinstance(error, FlashError) for error in errors)
    assert [error.kind() for error in errors] == [
        NorFlashErrorKind.NOT_ALIGNED,
        NorFlashErrorKind.OUT_OF_BOUNDS,
        NorFlashErrorKind.OTHER,
        NorFlashErrorKind.OTHER,
    ]


def test_custom_message_overrides_default():
    error = NotAlignedError("custom")
    assert str(error) == "custom"
    assert error.kind() is NorFlashErrorKind.NOT_ALIGNED