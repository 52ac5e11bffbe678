"""nwpass.utils.handlers -- helpers for implementing password hash handlers"""
#=========================================================
#imports
#=========================================================
#core
import logging; log = logging.getLogger(__name__)
#pkg
from nwpass import exc
from nwpass.utils import consteq, validate_secret
#local
__all__ = [
    #identify helpers
    'identify_regexp',

    #framework for implementing handlers
    'StaticHandler',
]

#=========================================================
#identify helpers
#=========================================================
def identify_regexp(hash, pat):
    "identify() helper for matching regexp"
    if isinstance(hash, bytes):
        try:
            hash = hash.decode("ascii")
        except UnicodeDecodeError:
            return False
    elif not isinstance(hash, str):
        raise exc.ExpectedStringError(hash, "hash")
    return pat.match(hash) is not None

#=====================================================
#StaticHandler
#=====================================================
class StaticHandler(object):
    """helper class for implementing hashes which have no settings.

    This class is designed to help in writing hash handlers
    which have no settings whatsoever; that is to say: no salt, no rounds, etc.
    These hashes can typically be recognized by the fact that they
    will always hash a password to *exactly* the same hash string
    (given the same context keywords).

    Usage
    =====

    In order to use this class, just subclass it, and then do the following:

        * fill out the :attr:`name` attribute with the name of your hash.
        * fill out the :attr:`_hash_regex` attribute with a regexp
          matching the hash strings it generates.
        * provide an implementation of the :meth:`_calc_checksum` method.
        * provide an implementation of the :meth:`_norm_hash` method.

    Based on the methods above, this class provides:

        * a :meth:`genconfig` method that returns ``None``.
        * a :meth:`genhash` method that validates the config and secret,
          then wraps :meth:`_calc_checksum`.
        * a :meth:`encrypt` method that wraps :meth:`genhash`.
        * a :meth:`verify` method that wraps :meth:`genhash`.

    Implementation Details
    ======================

    The default :meth:`verify` method uses constant time comparison of
    hash strings, after passing the hash through :meth:`_norm_hash`;
    which should map every accepted encoding of a hash (eg upper-case hex)
    onto the one :meth:`_calc_checksum` returns.

    Any context keywords (listed in :attr:`context_kwds`) are passed through
    to :meth:`_calc_checksum` unchanged.
    """

    #=====================================================
    #class attrs
    #=====================================================
    name = None #required - handler name
    _hash_regex = None #required - regexp identifying hash strings
    setting_kwds = ()
    context_kwds = ()

    #=====================================================
    #methods
    #=====================================================
    @classmethod
    def identify(cls, hash):
        return identify_regexp(hash, cls._hash_regex)

    @classmethod
    def genconfig(cls):
        return None

    @classmethod
    def genhash(cls, secret, config, **context):
        if config is not None and not cls.identify(config):
            raise exc.InvalidHashError(cls)
        validate_secret(secret)
        return cls._calc_checksum(secret, **context)

    @classmethod
    def _calc_checksum(cls, secret, **context): #pragma: no cover
        "given secret & context; calculate and return hash string"
        raise NotImplementedError("%s must implement _calc_checksum()" % (cls,))

    @classmethod
    def encrypt(cls, secret, **context):
        #NOTE: subclasses generally won't need to override this.
        return cls.genhash(secret, cls.genconfig(), **context)

    @classmethod
    def verify(cls, secret, hash, **context):
        #NOTE: subclasses generally won't need to override this.
        if hash is None:
            raise exc.ExpectedStringError(hash, "hash")
        if not cls.identify(hash):
            raise exc.InvalidHashError(cls)
        hash = cls._norm_hash(hash)
        result = cls.genhash(secret, hash, **context)
        return consteq(result, hash)

    @classmethod
    def _norm_hash(cls, hash): #pragma: no cover
        """[helper for verify] normalize identified hash for comparsion purposes.

        should return a native :class:`str` instance.
        """
        raise NotImplementedError("%s must implement _norm_hash()" % (cls,))

    #=====================================================
    #eoc
    #=====================================================

#=========================================================
#eof
#=========================================================
