import pytest

from spimem.interfaces import BlockDevice, Delay, Read, SpiDevice


@pytest.mark.parametrize("cls", [SpiDevice, Delay, Read, BlockDevice])
def test_interfaces_cannot_be_instantiated(cls):
    with pytest.raises(TypeError):
        cls()


@pytest.mark.parametrize(
    ("cls", "methods"),
    [
        (SpiDevice, ["transfer_in_place", "write", "transaction"]),
        (BlockDevice, ["erase_sectors", "erase_all", "write_bytes"]),
        (Read, ["read"]),
        (Delay, ["delay_us"]),
    ],
)
def test_instantiation_error_names_abstract_methods(cls, methods):
    with pytest.raises(TypeError) as info:
        cls()
    message = str(info.value)
    for method in methods:
        assert method in message