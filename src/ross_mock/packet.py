"""Defines the packet exchanged over a protocol interface.

A packet is treated as an opaque, comparable value by the mocks. Only the
three fields below take part in comparisons.
"""

from dataclasses import dataclass, fields
from typing import List

from .utils import format_bytes

#: The lowest device address a packet may carry.
FIRST_DEVICE_ADDRESS = 0x0000

#: The highest device address a packet may carry (addresses are 16 bit).
LAST_DEVICE_ADDRESS = 0xFFFF


def is_valid_device_address(address: int) -> bool:
    """Checks if a given address fits in the 16 bit device address space.

    Args:
        address (int): The address to validate.

    Returns:
        bool: True if the address is valid, False otherwise.
    """
    return isinstance(address, int) and FIRST_DEVICE_ADDRESS <= address <= LAST_DEVICE_ADDRESS


@dataclass(frozen=True)
class Packet:
    """An immutable protocol packet.

    Attributes:
        is_error (bool): True if the packet reports an error
        device_address (int): The address of the device the packet concerns
        data (bytes): The packet payload
    """

    is_error: bool
    device_address: int
    data: bytes = b""

    def __post_init__(self):
        if not is_valid_device_address(self.device_address):
            raise ValueError(
                f"Invalid device address: {self.device_address}. "
                f"Must be an integer between {FIRST_DEVICE_ADDRESS:#06x} and {LAST_DEVICE_ADDRESS:#06x} inclusive."
            )

        # Accept lists of ints for convenience, store bytes. A bare int would
        # otherwise become that many zero bytes.
        if isinstance(self.data, int):
            raise TypeError(f"Packet data must be a sequence of bytes, got int {self.data}")
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "is_error", bool(self.is_error))

    def diff(self, other: "Packet") -> List[str]:
        """Returns the names of the fields whose values differ from `other`.

        Args:
            other (Packet): The packet to compare against.

        Returns:
            List[str]: The differing field names, in declaration order.
        """
        return [field.name for field in fields(self) if getattr(self, field.name) != getattr(other, field.name)]

    def __str__(self) -> str:
        return (
            f"Packet(is_error={self.is_error}, device_address={self.device_address:#06x}, "
            f"data={format_bytes(self.data)})"
        )
