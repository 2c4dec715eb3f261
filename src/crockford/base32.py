# -*- test-case-name: crockford.test.test_base32 -*-

"""
base32.py: Douglas Crockford's Base32 symbol encoding for non-negative integers

See <http://www.crockford.com/wrmg/base32.html>. This is *not* the Base32
of RFC 4648: the alphabet differs, and what gets encoded is a number, not a
byte string.

When decoding, upper and lower case letters are accepted, I and L are read
as 1 and O as 0, and hyphens are ignored. When encoding, only upper case
symbols are produced.

    >>> encode(1234)
    '16J'
    >>> encode(123456789012345, split=5)
    '3G923-0VQVS'
    >>> decode('3g923-0vqvs')
    123456789012345
"""

from twisted.python import log

from crockford.tokens import CrockfordError, InvalidOption, MalformedInput
from crockford.vocab import (ENCODE_SYMBOLS, CHECKSUM_ENCODE_SYMBOLS, CHECKSUM_MODULUS,
                             DECODE_MAP, CHECKSUM_DECODE_MAP, INVALID_SYMBOL, foldCase)


ENCODE_OPTIONS = frozenset(['length', 'split', 'checksum'])
DECODE_OPTIONS = frozenset(['checksum'])


def _isInteger(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _checkOptions(opts, allowed):
    unknown = set(opts) - allowed
    if unknown:
        raise InvalidOption('unknown option(s): {}'.format(', '.join(sorted(unknown))))


def _checkString(string):
    if not isinstance(string, str):
        raise TypeError('expected a str, got {!r}'.format(type(string)))


def _clean(string):
    return foldCase(string.replace('-', ''))


def _split(string, interval):
    # groups are counted from the least significant (right) end
    head = len(string) % interval
    groups = [string[:head]] if head else []
    groups.extend(string[i:i + interval] for i in range(head, len(string), interval))
    return '-'.join(groups)


def encode(number, **opts):
    """Encode a non-negative integer into a symbol string.

    length   -- left-pad with '0' to at least this many symbols (hyphens are
                not counted)
    split    -- insert a hyphen every `split` symbols, counted from the right
    checksum -- append a mod-37 check symbol
    """
    _checkOptions(opts, ENCODE_OPTIONS)

    length = opts.get('length')
    split  = opts.get('split')

    if length is not None and (not _isInteger(length) or length < 0):
        raise InvalidOption('length must be a non-negative integer, got {!r}'.format(length))

    if split is not None and (not _isInteger(split) or split < 1):
        raise InvalidOption('split must be a positive integer, got {!r}'.format(split))

    if not _isInteger(number):
        raise TypeError('expected an integer, got {!r}'.format(number))

    if number < 0:
        raise CrockfordError('cannot encode a negative number', number)

    output = []
    buffer = number

    while True:
        output.append(ENCODE_SYMBOLS[buffer & 0x1F])
        buffer = buffer >> 5
        if not buffer:
            break

    output.reverse()

    if opts.get('checksum'):
        output.append(CHECKSUM_ENCODE_SYMBOLS[number % CHECKSUM_MODULUS])

    result = ''.join(output)

    if length:
        result = result.rjust(length, ENCODE_SYMBOLS[0])

    if split:
        result = _split(result, split)

    return result


def decode(string, **opts):
    """Decode a symbol string into an integer.

    Returns None if the string contains characters that can't be decoded or,
    with checksum=True, if its trailing check symbol does not match.
    """
    _checkOptions(opts, DECODE_OPTIONS)
    _checkString(string)

    checksum = bool(opts.get('checksum'))

    if checksum:
        if not string:
            return None

        string, checksum_char = string[:-1], string[-1]
        expected = CHECKSUM_DECODE_MAP.get(foldCase(checksum_char))

        if expected is None:
            return None

    number = 0

    for char in _clean(string):
        value = DECODE_MAP.get(char)
        if value is None:
            return None
        number = (number << 5) + value

    if checksum and number % CHECKSUM_MODULUS != expected:
        return None

    return number


def decode_strict(string, **opts):
    """Same as decode(), but raises MalformedInput instead of returning None.

    The checksum option is passed through to decode().
    """
    number = decode(string, **opts)

    if number is None:
        log.msg('crockford: rejecting malformed symbol string {!r}'.format(string))
        raise MalformedInput('cannot decode {!r}'.format(string))

    return number


def normalize(string, **opts):
    """Return the canonical spelling of a symbol string: upper case, no hyphens,
    synonyms resolved. Characters that can't be decoded become '?'.

    With checksum=True the last character is the check symbol and is
    re-appended as given.
    """
    _checkOptions(opts, DECODE_OPTIONS)
    _checkString(string)

    checksum_char = ''

    if opts.get('checksum') and string:
        string, checksum_char = string[:-1], string[-1]

    output = []

    for char in _clean(string):
        value = DECODE_MAP.get(char)
        if value is None:
            output.append(INVALID_SYMBOL)
        else:
            output.append(ENCODE_SYMBOLS[value])

    return ''.join(output) + checksum_char


def is_valid(string, **opts):
    """True if normalize() finds nothing it can't decode.

    With checksum=True only the body is checked: the trailing character is
    kept verbatim by normalize(), so an unknown check symbol still counts as
    valid here even though decode() returns None for it.
    """
    return INVALID_SYMBOL not in normalize(string, **opts)
