"""
Network address values.

IPAddr holds a single IPv4/IPv6 address and, when the wire text carried a
``/prefix`` suffix, the network that prefix describes. IPAddrList is the
space-separated list form used by the drop-ip request attribute.
"""

import ipaddress
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from pacicli.errors import InvalidAddressError
from pacicli.values.base import TextValue

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]
IPNetwork = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]

MASK_SEPARATOR = "/"


def _invalid(text: str, reason: str) -> InvalidAddressError:
    return InvalidAddressError(
        message=f"Invalid IP address text: '{text}' ({reason})",
        error_code="VALUE-InvalidAddress",
        details={"text": text, "reason": reason},
    )


@dataclass(frozen=True)
class IPAddr(TextValue):
    """
    An address with an optional network mask.

    Attributes:
        ip: The address itself
        network: The network given by the prefix length, or None when the
            text carried no mask
    """

    ip: IPAddress
    network: Optional[IPNetwork] = None

    @classmethod
    def parse(cls, text: str) -> "IPAddr":
        """
        Parse ``address`` or ``address/prefix`` text.

        Args:
            text: Wire text

        Returns:
            A new IPAddr

        Raises:
            InvalidAddressError: If the text is not a bare address or a
                strict CIDR pair
        """
        if "%" in text:
            # Scoped IPv6 zones are not part of the wire format
            raise _invalid(text, "zone index is not allowed")

        if MASK_SEPARATOR not in text:
            try:
                return cls(ipaddress.ip_address(text))
            except ValueError as e:
                raise _invalid(text, str(e)) from e

        _, _, prefix = text.partition(MASK_SEPARATOR)
        if not (prefix.isascii() and prefix.isdigit()):
            raise _invalid(text, "prefix length must be a decimal number")
        try:
            interface = ipaddress.ip_interface(text)
        except ValueError as e:
            raise _invalid(text, str(e)) from e
        return cls(interface.ip, interface.network)

    @property
    def prefixlen(self) -> Optional[int]:
        return self.network.prefixlen if self.network is not None else None

    def to_text(self) -> str:
        text = str(self.ip)
        if self.network is not None:
            text += f"{MASK_SEPARATOR}{self.network.prefixlen}"
        return text


class IPAddrList(TextValue, list):
    """Ordered list of IPAddr values, serialized space-separated."""

    def __init__(self, addresses: Iterable[IPAddr] = ()) -> None:
        super().__init__(addresses)

    @classmethod
    def parse(cls, text: str) -> "IPAddrList":
        return cls(IPAddr.parse(part) for part in text.split())

    @classmethod
    def _coerce(cls, value):
        if isinstance(value, (list, tuple)) and not isinstance(value, cls):
            return cls(IPAddr._coerce(item) for item in value)
        return super()._coerce(value)

    def to_text(self) -> str:
        return " ".join(address.to_text() for address in self)

    def __repr__(self) -> str:
        return f"IPAddrList({list.__repr__(self)})"
