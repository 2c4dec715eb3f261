
# application code should import everything from here

from crockford._version import __version__

from crockford.base32 import encode, decode, decode_strict, normalize, is_valid

from crockford.tokens import CrockfordError, InvalidOption, MalformedInput

from crockford.vocab import (ENCODE_SYMBOLS, CHECKSUM_SYMBOLS, CHECKSUM_ENCODE_SYMBOLS,
                             DECODE_MAP, CHECKSUM_DECODE_MAP, INVALID_SYMBOL, is_symbol)

_unused = [
    __version__,
    encode, decode, decode_strict, normalize, is_valid,
    CrockfordError, InvalidOption, MalformedInput,
    ENCODE_SYMBOLS, CHECKSUM_SYMBOLS, CHECKSUM_ENCODE_SYMBOLS,
    DECODE_MAP, CHECKSUM_DECODE_MAP, INVALID_SYMBOL, is_symbol,
]
del _unused
