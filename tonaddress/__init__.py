__version__ = "0.1.0"

from .address import (
    Address,
    DecodeResult,
    Base64Encoder,
    BASE64_STD_DEFAULT,
    BASE64_URL_DEFAULT,
)
from .alphabet import Base64Alphabet
from .crc import crc16
from .errors import ParseError, ParseReason
from .utils import (
    parse_addr,
    normalize_address,
    is_address,
    is_base64_address,
    is_raw_address,
)
"""
TON address codec

How to use
Example:
-------------------------------------------------------------------------------
from tonaddress import Address, BASE64_STD_DEFAULT

>> addr = Address.parse("0:e4d954ef9f4e1250a26b5bbad76a1cdd17cfd08babad6f4c23e372270aef6f76")
>> str(addr)
EQDk2VTvn04SUKJrW7rXahzdF8_Qi6utb0wj43InCu9vdjrR

>> addr.to_base64(BASE64_STD_DEFAULT)
EQDk2VTvn04SUKJrW7rXahzdF8/Qi6utb0wj43InCu9vdjrR

>> result = Address.from_base64("UQAWzEKcdnykvXfUNouqdS62tvrp32bCxuKS6eQrS6ISgZ8t")
>> result.is_bounceable(), result.address.to_raw_address()
(False, '0:16cc429c767ca4bd77d4368baa752eb6b6fae9df66c2c6e292e9e42b4ba21281')
-------------------------------------------------------------------------------
"""
