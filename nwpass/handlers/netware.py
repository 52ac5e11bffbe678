"""nwpass.handlers.netware - NetWare 3.x bindery passwords & login hashes

The NetWare 3.x bindery never stores a password; the ``PASSWORD`` property of
a bindery object holds a 16 byte hash of it, salted by the object's 32-bit id.

At login, the server hands the client a random 8 byte session key. Both sides
then encrypt the 16 byte password hash with that key. The client does so
starting from the password the user typed, the server from the hash in the
bindery; the server grants access if the 8 byte results match. Neither the
password nor the stored hash ever cross the wire.

This module provides the :class:`netware_bindery` handler (for the stored
hash, rendered as hexidecimal), and plain functions for each side of the
login exchange.
"""
#=========================================================
#imports
#=========================================================
#core
from binascii import hexlify, unhexlify
import re
import logging; log = logging.getLogger(__name__)
#pkg
from nwpass import exc
from nwpass.utils import consteq, int_to_bytes, to_bytes
from nwpass.utils.nwcrypt import stretch_input, nw_hash, nw_encrypt, \
                                 DIGEST_SIZE, SALT_SIZE
import nwpass.utils.handlers as uh
#local
__all__ = [
    "netware_bindery",
    "object_id_to_salt",
    "hash_object_password",
    "client_login_hash",
    "server_login_hash",
    "verify_login",
]

#=========================================================
#constants
#=========================================================

#: largest valid bindery object id
MAX_OBJECT_ID = 0xffffffff

#: encoding used for unicode passwords, matching the DOS clients' codepage
DEFAULT_ENCODING = "cp437"

#=========================================================
#password hash
#=========================================================
def object_id_to_salt(object_id):
    "encode bindery object id as 4 byte big-endian salt"
    if not isinstance(object_id, int) or isinstance(object_id, bool):
        raise exc.ExpectedTypeError(object_id, "int", "object_id")
    if object_id < 0 or object_id > MAX_OBJECT_ID:
        raise ValueError("object_id must be between 0 and 0x%08x: %r" %
                         (MAX_OBJECT_ID, object_id))
    return int_to_bytes(object_id, SALT_SIZE)

def hash_object_password(object_id, secret, encoding=None):
    """calculate the password hash stored in the bindery for an object.

    :arg object_id: 32-bit bindery object id
    :arg secret: password as bytes or unicode, of any length
    :param encoding:
        encoding used for unicode passwords;
        defaults to ``cp437``.

    :returns: 16 byte password hash

    .. note::

        No size limit is applied here; that is left to
        :class:`netware_bindery` and :class:`~nwpass.context.LoginContext`.
    """
    salt = object_id_to_salt(object_id)
    secret = to_bytes(secret, encoding or DEFAULT_ENCODING, "secret")
    return nw_hash(salt, stretch_input(secret))

#=========================================================
#login
#=========================================================
def _norm_stored_hash(stored_hash):
    "accept raw 16 byte hash, or netware_bindery hash string"
    if isinstance(stored_hash, str):
        if not netware_bindery.identify(stored_hash):
            raise exc.InvalidHashError(netware_bindery)
        return unhexlify(stored_hash.encode("ascii"))
    elif isinstance(stored_hash, (bytes, bytearray)):
        if len(stored_hash) != DIGEST_SIZE:
            raise exc.ExpectedSizeError(stored_hash, DIGEST_SIZE, "stored_hash")
        return bytes(stored_hash)
    else:
        raise exc.ExpectedTypeError(stored_hash, "bytes or hash string",
                                    "stored_hash")

def client_login_hash(object_id, key, secret, encoding=None):
    """calculate login hash on the client, from the user's password.

    :arg object_id: 32-bit bindery object id of the user
    :arg key: 8 byte session key issued by the server
    :arg secret: password as bytes or unicode
    :param encoding: encoding used for unicode passwords

    :returns: 8 byte login hash
    """
    return nw_encrypt(key, hash_object_password(object_id, secret, encoding))

def server_login_hash(key, stored_hash):
    """calculate login hash on the server, from the stored password hash.

    :arg key: 8 byte session key issued to the client
    :arg stored_hash:
        password hash from the bindery,
        either as 16 raw bytes or as a :class:`netware_bindery` hash string.

    :returns: 8 byte login hash
    """
    return nw_encrypt(key, _norm_stored_hash(stored_hash))

def verify_login(key, stored_hash, login_hash):
    """check login hash sent by a client against the stored password hash.

    :returns:
        ``True`` if the client proved knowledge of the password,
        ``False`` otherwise.
    """
    login_hash = to_bytes(login_hash, None, "login_hash")
    return consteq(server_login_hash(key, stored_hash), login_hash)

#=========================================================
#handler
#=========================================================
class netware_bindery(uh.StaticHandler):
    """This class implements the NetWare 3.x bindery password hash, and follows the :ref:`password-hash-api`.

    It has no salt and a single fixed round; but requires the id
    of the bindery object the password belongs to.

    The :meth:`encrypt()` and :meth:`genconfig` methods accept no optional keywords.

    The :meth:`encrypt()`, :meth:`genhash()`, and :meth:`verify()` methods all require the
    following additional contextual keyword:

    :param object_id: 32-bit integer id of the bindery object.

    And accept one optional keyword:

    :param encoding:
        This specifies what character encoding should be used for unicode
        passwords. It defaults to ``cp437``, the codepage of most DOS clients.

    Note that while this class outputs digests in lower-case hexidecimal,
    it will accept upper-case as well.
    """
    #=========================================================
    # class attrs
    #=========================================================
    name = "netware_bindery"
    setting_kwds = ()
    context_kwds = ("object_id", "encoding")

    _hash_regex = re.compile(r"^[0-9a-f]{32}$", re.I)

    #=========================================================
    # methods
    #=========================================================
    @classmethod
    def _norm_hash(cls, hash):
        if isinstance(hash, bytes):
            hash = hash.decode("ascii")
        return hash.lower()

    @classmethod
    def _calc_checksum(cls, secret, object_id=None, encoding=None):
        return hexlify(cls.raw(secret, object_id, encoding)).decode("ascii")

    @classmethod
    def raw(cls, secret, object_id=None, encoding=None):
        """encode password using the bindery hash algorithm.

        :arg secret: secret as unicode or bytes
        :arg object_id: id of the bindery object
        :param encoding: encoding to use for unicode secrets

        :returns: returns string of 16 raw bytes
        """
        if object_id is None:
            raise TypeError("object_id keyword must be specified for this algorithm")
        return hash_object_password(object_id, secret, encoding)

    #=========================================================
    # eoc
    #=========================================================

#=========================================================
#eof
#=========================================================
