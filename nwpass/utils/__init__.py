"""nwpass utility functions"""
#=================================================================================
#imports
#=================================================================================
#core
import logging; log = logging.getLogger(__name__)
import os
#pkg
from nwpass import exc
#local
__all__ = [
    #bytes<->unicode
    'to_bytes',
    'to_unicode',

    # string manipulation
    'consteq',

    #byte manipulation
    'int_to_bytes',

    #secrets
    'MAX_PASSWORD_SIZE',
    'validate_secret',
]

#=================================================================================
#constants
#=================================================================================

#: hard limit on the size of passwords accepted by nwpass
MAX_PASSWORD_SIZE = int(os.environ.get("NWPASS_MAX_PASSWORD_SIZE") or 4096)

#==========================================================
#bytes <-> unicode conversion helpers
#==========================================================

def to_bytes(source, encoding="utf-8", errname="value"):
    """helper to encoding unicode -> bytes

    this function takes in a ``source`` string.
    if unicode, encodes it using the specified ``encoding``.
    if bytes (or bytearray), returns it as bytes.
    all other types result in a :exc:`TypeError`.

    :arg source: source bytes/unicode to process
    :arg encoding: target character encoding or ``None``.
    :param errname: optional name of variable/noun to reference when raising errors

    :raises TypeError: if unicode encountered but ``encoding=None`` specified;
                       or if source is not unicode or bytes.

    :returns: bytes object
    """
    if isinstance(source, bytes):
        return source
    elif isinstance(source, bytearray):
        return bytes(source)
    elif not encoding:
        raise exc.ExpectedTypeError(source, "bytes", errname)
    elif isinstance(source, str):
        return source.encode(encoding)
    else:
        raise exc.ExpectedStringError(source, errname)

def to_unicode(source, source_encoding="utf-8", errname="value"):
    """take in unicode or bytes, return unicode

    if bytes provided, decodes using specified encoding.
    leaves unicode alone.

    :raises TypeError: if source is not unicode or bytes.

    :arg source: source bytes/unicode to process
    :arg source_encoding: encoding to use when decoding bytes instances
    :param errname: optional name of variable/noun to reference when raising errors

    :returns: unicode object
    """
    if isinstance(source, str):
        return source
    elif not source_encoding:
        raise exc.ExpectedTypeError(source, "unicode", errname)
    elif isinstance(source, bytes):
        return source.decode(source_encoding)
    else:
        raise exc.ExpectedStringError(source, errname)

#=================================================================================
#string helpers
#=================================================================================
def consteq(left, right):
    """check two strings/bytes for equality, taking constant time relative
    to the size of the righthand input.

    The purpose of this function is to aid in preventing timing attacks
    during digest comparisons, such as when the server checks a client's
    login hash.
    """
    # NOTE:
    # This function attempts to take an amount of time proportional
    # to ``THETA(len(right))``. The main loop is designed so that timing attacks
    # against this function should reveal nothing about how much (or which
    # parts) of the two inputs match.

    # validate types
    if isinstance(left, str):
        if not isinstance(right, str):
            raise TypeError("inputs must be both unicode or bytes")
        is_bytes = False
    elif isinstance(left, (bytes, bytearray)):
        if not isinstance(right, (bytes, bytearray)):
            raise TypeError("inputs must be both unicode or bytes")
        is_bytes = True
    else:
        raise TypeError("inputs must be both unicode or bytes")

    # do size comparison.
    # NOTE: the double-if construction below is done deliberately, to ensure
    # the same number of operations (including branches) is performed regardless
    # of whether left & right are the same size.
    same = (len(left) == len(right))
    if same:
        # if sizes are the same, setup loop to perform actual check of contents.
        tmp = left
        result = 0
    if not same:
        # if sizes aren't the same, set 'result' so equality will fail regardless
        # of contents. then, to ensure we do exactly 'len(right)' iterations
        # of the loop, just compare 'right' against itself.
        tmp = right
        result = 1

    # run constant-time string comparision
    if is_bytes:
        for l,r in zip(tmp, right):
            result |= l ^ r
    else:
        for l,r in zip(tmp, right):
            result |= ord(l) ^ ord(r)
    return result == 0

#==========================================================
#bytes helpers
#==========================================================
def int_to_bytes(value, count):
    "encodes integer into single big-endian byte string"
    assert value < (1<<(8*count)), "value too large for %d bytes: %d" % (count, value)
    return bytes(
        ((value>>s) & 0xff)
        for s in range(8*count-8,-8,-8)
    )

#==========================================================
#secret helpers
#==========================================================
def validate_secret(secret, limit=None):
    """ensure secret has correct type & size

    :arg secret: password as unicode or bytes
    :param limit: optional size limit; defaults to :data:`MAX_PASSWORD_SIZE`

    :raises TypeError: if secret is not unicode or bytes
    :raises PasswordSizeError: if secret is larger than the limit
    """
    if not isinstance(secret, (str, bytes, bytearray)):
        raise exc.ExpectedStringError(secret, "secret")
    if limit is None:
        limit = MAX_PASSWORD_SIZE
    if len(secret) > limit:
        raise exc.PasswordSizeError(limit)

#=================================================================================
#eof
#=================================================================================
