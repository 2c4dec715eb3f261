# -*- test-case-name: crockford.test.test_vocab -*-

import string
from types import MappingProxyType

# here are the symbol tables. The encode alphabet is ten digits and 22
# letters; I L O U are left out (I, L and O look like 1 and 0, U invites
# accidental obscenity).

ENCODE_SYMBOLS = tuple('0123456789ABCDEFGHJKMNPQRSTVWXYZ')

# only ever emitted in the trailing checksum position
CHECKSUM_SYMBOLS = ('*', '~', '$', '=', 'U')

CHECKSUM_ENCODE_SYMBOLS = ENCODE_SYMBOLS + CHECKSUM_SYMBOLS
CHECKSUM_MODULUS = len(CHECKSUM_ENCODE_SYMBOLS)

# normalize() puts this where it finds something it can't decode
INVALID_SYMBOL = '?'

assert len(ENCODE_SYMBOLS) == 32, len(ENCODE_SYMBOLS)
assert CHECKSUM_MODULUS == 37, CHECKSUM_MODULUS
assert INVALID_SYMBOL not in CHECKSUM_ENCODE_SYMBOLS


def _buildDecodeMap(symbols):
    table = dict((symbol, value) for value, symbol in enumerate(symbols))
    # decode-only synonyms
    table.update({'I': 1, 'L': 1, 'O': 0})
    return MappingProxyType(table)


DECODE_MAP          = _buildDecodeMap(ENCODE_SYMBOLS)
CHECKSUM_DECODE_MAP = _buildDecodeMap(CHECKSUM_ENCODE_SYMBOLS)


# ASCII letters only; str.upper() maps 'ß' to 'SS'
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def foldCase(s):
    return s.translate(_UPPER)


def getDecodeMap(checksum=False):
    if checksum:
        return CHECKSUM_DECODE_MAP
    return DECODE_MAP


def is_symbol(char, checksum=False):
    """Return True if a single character is accepted by the decoder.

    Lowercase letters are accepted, since decoding folds case. With
    checksum=True the five checksum-only symbols are accepted too.
    """
    if len(char) != 1:
        return False
    return foldCase(char) in getDecodeMap(checksum)
