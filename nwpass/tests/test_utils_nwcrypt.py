"""tests for nwpass.utils.nwcrypt"""
#=========================================================
#imports
#=========================================================
#core
from binascii import unhexlify
import logging; log = logging.getLogger(__name__)
#site
#pkg
from nwpass.tests.utils import TestCase
from nwpass.utils.nwcrypt import NIBBLE_TABLE, KEY_TABLE, \
                                 stretch_input, nw_hash, nw_encrypt
#module

#=========================================================
#tables
#=========================================================

# nibble table, one hex digit per entry
NIBBLE_DIGITS = (
    "780864e4" "5c17bfa8" "f8cc941e" "46240ab9"
    "2fb1d219" "5e700266" "0738293f" "7fcf64a0"
    "23abd83a" "17cf189d" "9194e4c5" "5c8b239e"
    "7769efc8" "d1a6ed07" "7a01f54b" "7bec95d1"
    "bd135de6" "30bbf364" "9da31494" "83be5052"
    "cbd5d5d2" "d9aca0b3" "536951ee" "0e82d220"
    "4f859686" "babf0728" "c73a1425" "f7ace593"
    "e712e1f4" "a6c6f430" "c036f87b" "2dc6aa8d"
)

KEY_HEX = ("48934667983de68d" "b7107a265ab9b135"
           "6b0fd570aefbad11" "f447dca7eccf50c0")

class TableTest(TestCase):
    descriptionPrefix = "nwcrypt tables"

    def test_nibble_table(self):
        "test NIBBLE_TABLE contents"
        self.assertEqual(len(NIBBLE_TABLE), 256)
        self.assertEqual(len(NIBBLE_DIGITS), 256)
        for idx, digit in enumerate(NIBBLE_DIGITS):
            self.assertEqual(NIBBLE_TABLE[idx], int(digit, 16),
                             "wrong entry %d:" % idx)

    def test_key_table(self):
        "test KEY_TABLE contents"
        self.assertEqual(KEY_TABLE, unhexlify(KEY_HEX))
        self.assertEqual(len(KEY_TABLE), 32)

#=========================================================
#stretch
#=========================================================
class StretchTest(TestCase):
    descriptionPrefix = "stretch_input()"

    def test_empty(self):
        "test empty input yields KEY_TABLE"
        self.assertEqual(stretch_input(b""), KEY_TABLE)
        self.assertEqual(stretch_input(b"\x00\x00\x00"), KEY_TABLE)

    def test_short(self):
        "test input shorter than block is cycled w/ KEY_TABLE separator"
        result = stretch_input(b"HELLO123")
        correct = (b"HELLO123" + KEY_TABLE[8:9] +
                   b"HELLO123" + KEY_TABLE[17:18] +
                   b"HELLO123" + KEY_TABLE[26:27] +
                   b"HELLO")
        self.assertEqual(result, correct)

        # single byte alternates w/ table
        result = stretch_input(b"a")
        for idx in range(32):
            if idx & 1:
                self.assertEqual(result[idx], KEY_TABLE[idx])
            else:
                self.assertEqual(result[idx], ord("a"))

    def test_full_block(self):
        "test exactly 32 byte input is unchanged"
        data = bytes(range(1, 33))
        self.assertEqual(stretch_input(data), data)

    def test_long(self):
        "test inputs longer than block are folded"
        # 64 bytes -> xor of both halves
        data = bytes(range(1, 65))
        correct = bytes(a ^ b for a, b in zip(data[:32], data[32:]))
        self.assertEqual(stretch_input(data), correct)

        # 33 bytes -> first block, xor'd w/ last byte cycled against table
        data = bytes(range(1, 34))
        result = stretch_input(data)
        for idx in range(32):
            if idx & 1:
                correct = data[idx] ^ KEY_TABLE[idx]
            else:
                correct = data[idx] ^ data[32]
            self.assertEqual(result[idx], correct, "byte %d:" % idx)

    def test_padding(self):
        "test trailing NULs are ignored"
        for data in [b"abc", b"HELLO123", bytes(range(1, 33)),
                     bytes(range(1, 50))]:
            result = stretch_input(data)
            self.assertEqual(stretch_input(data + b"\x00"), result)
            self.assertEqual(stretch_input(data + b"\x00" * 40), result)

    def test_size(self):
        "test size parameter"
        self.assertEqual(stretch_input(b"abcdef", 3), stretch_input(b"abc"))
        self.assertEqual(stretch_input(b"abcdef", 0), KEY_TABLE)
        self.assertEqual(stretch_input(b"abcdef", 6), stretch_input(b"abcdef"))
        self.assertRaises(ValueError, stretch_input, b"abc", 4)
        self.assertRaises(ValueError, stretch_input, b"abc", -1)

    def test_types(self):
        "test input types"
        self.assertEqual(stretch_input(bytearray(b"abc")), stretch_input(b"abc"))
        self.assertIsInstance(stretch_input(bytearray(b"abc")), bytes)
        self.assertRaises(TypeError, stretch_input, "abc")
        self.assertRaises(TypeError, stretch_input, None)

#=========================================================
#hash
#=========================================================
class HashTest(TestCase):
    descriptionPrefix = "nw_hash()"

    salt = b"\x05\x00\x00\x26"

    def test_known(self):
        "test known bindery hashes"
        self.assertEqual(nw_hash(self.salt, stretch_input(b"HELLO123")),
                         unhexlify("a3c2a166476a774d52edba3dd1974b56"))
        self.assertEqual(
            nw_hash(self.salt, stretch_input(b"HORSE BATTERY STABLE NETWARE")),
            unhexlify("74577f98079006f3539a8e94ebdee919"))

        # several blocks folded together
        self.assertEqual(nw_hash(self.salt, stretch_input(b"Q" * 99)),
                         unhexlify("be59fbf0265cd030cc188c5cedfa9ffd"))

    def test_salt(self):
        "test salt alters result"
        data = stretch_input(b"HELLO123")
        h1 = nw_hash(self.salt, data)
        self.assertEqual(nw_hash(bytearray(self.salt), data), h1)
        self.assertNotEqual(nw_hash(b"\x26\x00\x00\x05", data), h1)
        self.assertNotEqual(nw_hash(b"\x00\x00\x00\x00", data), h1)

    def test_result(self):
        "test result size"
        for data in [KEY_TABLE, bytes(32), bytes(range(32))]:
            result = nw_hash(self.salt, data)
            self.assertIsInstance(result, bytes)
            self.assertEqual(len(result), 16)

    def test_border(self):
        "test invalid inputs are rejected"
        data = stretch_input(b"HELLO123")
        self.assertRaises(ValueError, nw_hash, self.salt[:3], data)
        self.assertRaises(ValueError, nw_hash, self.salt + b"\x00", data)
        self.assertRaises(ValueError, nw_hash, self.salt, data[:31])
        self.assertRaises(ValueError, nw_hash, self.salt, data + b"\x00")
        self.assertRaises(TypeError, nw_hash, "1234", data)
        self.assertRaises(TypeError, nw_hash, self.salt, None)

#=========================================================
#encrypt
#=========================================================
class EncryptTest(TestCase):
    descriptionPrefix = "nw_encrypt()"

    key = unhexlify("3fb17e62fc11f86f")
    data = unhexlify("74577f98079006f3539a8e94ebdee919")

    def test_result(self):
        "test result is deterministic & 8 bytes"
        result = nw_encrypt(self.key, self.data)
        self.assertIsInstance(result, bytes)
        self.assertEqual(len(result), 8)
        self.assertEqual(nw_encrypt(bytearray(self.key), bytearray(self.data)),
                         result)

    def test_known(self):
        "test known login hash"
        self.assertEqual(nw_encrypt(self.key, self.data),
                         unhexlify("9778d536731d2974"))

    def test_key(self):
        "test key alters result"
        result = nw_encrypt(self.key, self.data)
        self.assertNotEqual(nw_encrypt(bytes(8), self.data), result)
        self.assertNotEqual(nw_encrypt(self.key[:4] + bytes(4), self.data),
                            result)

        # the final fold is symmetric in the two halves of the key
        self.assertEqual(nw_encrypt(self.key[4:] + self.key[:4], self.data),
                         result)

    def test_border(self):
        "test invalid inputs are rejected"
        self.assertRaises(ValueError, nw_encrypt, self.key[:7], self.data)
        self.assertRaises(ValueError, nw_encrypt, self.key, self.data[:15])
        self.assertRaises(ValueError, nw_encrypt, self.key, self.data + b"\x00")
        self.assertRaises(TypeError, nw_encrypt, None, self.data)
        self.assertRaises(TypeError, nw_encrypt, self.key, "x" * 16)

#=========================================================
#EOF
#=========================================================
