import ipaddress

from .base import ValidatorBase
from .strings import MatchAny


class IPv4(ValidatorBase):
    """ Validate an IPv4 address string.

    In strict mode, addresses from private and reserved blocks are rejected:

    * `0.0.0.0/8`, `10.0.0.0/8`, `127.0.0.0/8`
    * `172.16.0.0/12`, `192.168.0.0/16`
    * everything from `224.0.0.0` and above: multicast, reserved, broadcast

    ```python
    from fieldcheck.validators import IPv4

    IPv4()('192.168.1.1')  #-> True
    IPv4(strict=True)('192.168.1.1')  #-> False
    IPv4(strict=True)('8.8.8.8')  #-> True
    ```
    """

    name = 'IPv4 address'

    @classmethod
    def is_reserved(cls, address):
        """ Test whether the address belongs to a private or reserved block

        :type address: ipaddress.IPv4Address
        :rtype: bool
        """
        a, b = address.packed[:2]
        return (a in (0, 10, 127) or a > 223
                or (a == 172 and 16 <= b <= 31)
                or (a == 192 and b == 168))

    def __call__(self, v):
        if not isinstance(v, str):
            return False
        try:
            address = ipaddress.IPv4Address(v)
        except ValueError:  # AddressValueError
            return False
        return not (self.strict and self.is_reserved(address))


class IPv6(ValidatorBase):
    """ Validate an IPv6 address string """

    name = 'IPv6 address'

    def __call__(self, v):
        if not isinstance(v, str):
            return False
        try:
            ipaddress.IPv6Address(v)
        except ValueError:
            return False
        return True


class Mac(MatchAny):
    """ A MAC address: six hex octets separated with '-' or ':', case-insensitive.

    The separator should be the same throughout the address.

    ```python
    from fieldcheck.validators import Mac

    Mac()('A0-C5-89-59-0A-D3')  #-> True
    Mac()('a0:c5:89:59:0a:d3')  #-> True
    Mac()('A0:C5-89:59-0A:D3')  #-> False
    ```
    """

    _rexes = (
        r'(?i)[0-9a-f]{2}(?:-[0-9a-f]{2}){5}',
        r'(?i)[0-9a-f]{2}(?::[0-9a-f]{2}){5}',
    )

    def __init__(self, strict=False):
        super(Mac, self).__init__(self._rexes, 'MAC address', strict)


__all__ = ('IPv4', 'IPv6', 'Mac',)
