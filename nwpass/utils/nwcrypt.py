"""nwpass.utils.nwcrypt -- NetWare 3.x password hash & login encryption primitives

This module implements the three raw transforms used by the NetWare 3.x
bindery to store passwords and by the NCP login exchange to prove knowledge
of them:

* :func:`stretch_input` folds a variable-length byte string into 32 bytes.
* :func:`nw_hash` (known elsewhere as "shuffle") compresses a 32 byte block
  into 16 bytes, salted by 4 bytes.
* :func:`nw_encrypt` combines a 16 byte block with an 8 byte session key,
  producing the 8 byte login hash.

None of these are cryptographically strong; they exist only to interoperate
with existing servers, clients and bindery files, and have to be reproduced
bit-for-bit (including their quirks).
"""
#=============================================================================
# imports
#=============================================================================
# pkg
from nwpass import exc
# local
__all__ = [
    "NIBBLE_TABLE",
    "KEY_TABLE",
    "stretch_input",
    "nw_hash",
    "nw_encrypt",
]

#=============================================================================
# constants
#=============================================================================

#: substitution table mapping every byte value to a nibble,
#: used to fold the 32 byte work buffer of nw_hash() down to 16 bytes.
NIBBLE_TABLE = bytes([
    0x7, 0x8, 0x0, 0x8, 0x6, 0x4, 0xE, 0x4,
    0x5, 0xC, 0x1, 0x7, 0xB, 0xF, 0xA, 0x8,
    0xF, 0x8, 0xC, 0xC, 0x9, 0x4, 0x1, 0xE,
    0x4, 0x6, 0x2, 0x4, 0x0, 0xA, 0xB, 0x9,
    0x2, 0xF, 0xB, 0x1, 0xD, 0x2, 0x1, 0x9,
    0x5, 0xE, 0x7, 0x0, 0x0, 0x2, 0x6, 0x6,
    0x0, 0x7, 0x3, 0x8, 0x2, 0x9, 0x3, 0xF,
    0x7, 0xF, 0xC, 0xF, 0x6, 0x4, 0xA, 0x0,
    0x2, 0x3, 0xA, 0xB, 0xD, 0x8, 0x3, 0xA,
    0x1, 0x7, 0xC, 0xF, 0x1, 0x8, 0x9, 0xD,
    0x9, 0x1, 0x9, 0x4, 0xE, 0x4, 0xC, 0x5,
    0x5, 0xC, 0x8, 0xB, 0x2, 0x3, 0x9, 0xE,
    0x7, 0x7, 0x6, 0x9, 0xE, 0xF, 0xC, 0x8,
    0xD, 0x1, 0xA, 0x6, 0xE, 0xD, 0x0, 0x7,
    0x7, 0xA, 0x0, 0x1, 0xF, 0x5, 0x4, 0xB,
    0x7, 0xB, 0xE, 0xC, 0x9, 0x5, 0xD, 0x1,
    0xB, 0xD, 0x1, 0x3, 0x5, 0xD, 0xE, 0x6,
    0x3, 0x0, 0xB, 0xB, 0xF, 0x3, 0x6, 0x4,
    0x9, 0xD, 0xA, 0x3, 0x1, 0x4, 0x9, 0x4,
    0x8, 0x3, 0xB, 0xE, 0x5, 0x0, 0x5, 0x2,
    0xC, 0xB, 0xD, 0x5, 0xD, 0x5, 0xD, 0x2,
    0xD, 0x9, 0xA, 0xC, 0xA, 0x0, 0xB, 0x3,
    0x5, 0x3, 0x6, 0x9, 0x5, 0x1, 0xE, 0xE,
    0x0, 0xE, 0x8, 0x2, 0xD, 0x2, 0x2, 0x0,
    0x4, 0xF, 0x8, 0x5, 0x9, 0x6, 0x8, 0x6,
    0xB, 0xA, 0xB, 0xF, 0x0, 0x7, 0x2, 0x8,
    0xC, 0x7, 0x3, 0xA, 0x1, 0x4, 0x2, 0x5,
    0xF, 0x7, 0xA, 0xC, 0xE, 0x5, 0x9, 0x3,
    0xE, 0x7, 0x1, 0x2, 0xE, 0x1, 0xF, 0x4,
    0xA, 0x6, 0xC, 0x6, 0xF, 0x4, 0x3, 0x0,
    0xC, 0x0, 0x3, 0x6, 0xF, 0x8, 0x7, 0xB,
    0x2, 0xD, 0xC, 0x6, 0xA, 0xA, 0x8, 0xD,
])

#: per-position constant, subtracted during the nw_hash() rounds,
#: and used as filler by stretch_input().
KEY_TABLE = bytes([
    0x48, 0x93, 0x46, 0x67, 0x98, 0x3D, 0xE6, 0x8D,
    0xB7, 0x10, 0x7A, 0x26, 0x5A, 0xB9, 0xB1, 0x35,
    0x6B, 0x0F, 0xD5, 0x70, 0xAE, 0xFB, 0xAD, 0x11,
    0xF4, 0x47, 0xDC, 0xA7, 0xEC, 0xCF, 0x50, 0xC0,
])

BLOCK_SIZE = 32 # size of stretched input
DIGEST_SIZE = 16 # size of nw_hash() output
SALT_SIZE = 4
KEY_SIZE = 8 # session key size
LOGIN_HASH_SIZE = 8

#=============================================================================
# support
#=============================================================================
def _as_bytes(value, param):
    "validate buffer type, returning it as bytes"
    if isinstance(value, bytes):
        return value
    elif isinstance(value, bytearray):
        return bytes(value)
    raise exc.ExpectedTypeError(value, "bytes", param)

def _as_block(value, size, param):
    "validate fixed-size buffer, returning it as bytes"
    value = _as_bytes(value, param)
    if len(value) != size:
        raise exc.ExpectedSizeError(value, size, param)
    return value

#=============================================================================
# stretch
#=============================================================================
def stretch_input(data, size=None):
    """expand (or fold) input to the 32 byte block used by :func:`nw_hash`.

    :arg data: input as bytes
    :param size:
        declared size of input; defaults to ``len(data)``.
        callers passing a fixed-size, NUL padded buffer may pass
        the buffer's size here; trailing NULs are never significant.

    :returns: 32 bytes
    """
    data = _as_bytes(data, "data")
    if size is None:
        size = len(data)
    elif not 0 <= size <= len(data):
        raise ValueError("size must be between 0 and %d: %r" % (len(data), size))

    # input is zero padded at the end, only the logical part is used.
    data = data[:size].rstrip(b"\x00")
    remaining = len(data)

    # inputs larger than a block have their leading blocks xor'd together.
    # NOTE: uses '>' so the final block (even if complete) is left
    #       for the tail loop below.
    out = bytearray(BLOCK_SIZE)
    offset = 0
    while remaining > BLOCK_SIZE:
        for n in range(BLOCK_SIZE):
            out[n] ^= data[offset + n]
        offset += BLOCK_SIZE
        remaining -= BLOCK_SIZE

    # cycle through the tail, injecting a KEY_TABLE byte after each pass
    pos = 0
    for n in range(BLOCK_SIZE):
        if pos == remaining:
            out[n] ^= KEY_TABLE[n]
            pos = 0
        else:
            out[n] ^= data[offset + pos]
            pos += 1
    return bytes(out)

#=============================================================================
# hash
#=============================================================================
def nw_hash(salt, data):
    """salted compression of 32 byte block into 16 bytes.

    :arg salt: 4 byte salt (the big-endian object id, or half a session key)
    :arg data: 32 byte block, as returned by :func:`stretch_input`

    :returns: 16 bytes
    """
    salt = _as_block(salt, SALT_SIZE, "salt")
    data = _as_block(data, BLOCK_SIZE, "data")

    temp = bytearray(data[n] ^ salt[n & 3] for n in range(BLOCK_SIZE))

    # two rounds; 'last' carries over between rounds, and every step
    # sees the values written by the steps before it.
    last = 0
    for i in range(2):
        for index in range(BLOCK_SIZE):
            v = (temp[(last + index) & 0x1f] - KEY_TABLE[index]) & 0xff
            new_value = ((temp[index] + last) & 0xff) ^ v
            last = (last + new_value) & 0xff
            temp[index] = new_value

    # each work byte contributes a nibble: even index low, odd index high
    return bytes(
        NIBBLE_TABLE[temp[index]] | (NIBBLE_TABLE[temp[index+1]] << 4)
        for index in range(0, BLOCK_SIZE, 2)
    )

#=============================================================================
# encrypt
#=============================================================================
def nw_encrypt(key, data):
    """encrypt 16 byte block using 8 byte session key.

    :arg key: 8 byte session key
    :arg data: 16 byte block (normally the stored password hash)

    :returns: 8 byte login hash
    """
    key = _as_block(key, KEY_SIZE, "key")
    data = _as_block(data, DIGEST_SIZE, "data")

    expanded = stretch_input(data, DIGEST_SIZE)
    temp = nw_hash(key[:4], expanded) + nw_hash(key[4:], expanded)

    # out[n] = temp[n] ^ temp[31 - n] ^ temp[15 - n] ^ temp[16 + n]
    return bytes(
        temp[n] ^ temp[31-n] ^ temp[15-n] ^ temp[16+n]
        for n in range(LOGIN_HASH_SIZE)
    )

#=============================================================================
# eof
#=============================================================================
