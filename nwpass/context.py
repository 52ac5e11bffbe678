"""nwpass.context - LoginContext class, for configuring bindery password handling"""
#=========================================================
#imports
#=========================================================
#core
from codecs import lookup as _lookup_codec
from configparser import ConfigParser
from io import StringIO
import logging; log = logging.getLogger(__name__)
from warnings import warn
#site
#libs
from nwpass import exc, utils
from nwpass.exc import NwpassConfigWarning
from nwpass.handlers import netware
from nwpass.utils import to_unicode, validate_secret
#pkg
#local
__all__ = [
    'LoginContext',
]

#=========================================================
#LoginContext
#=========================================================
class LoginContext(object):
    """Helper for hashing bindery passwords & checking logins with a shared configuration.

    Instances of this class bundle the options an application (for example
    a server emulator, or a tool migrating bindery accounts) wants applied
    consistently to every password it handles.

    This class can be created one of three ways: directly through it's
    constructor (which accepts the options below as keywords), from an
    INI-formatted string using :meth:`from_string`, or from an INI file
    using :meth:`from_path`.

    :type encoding: str
    :param encoding:
        Character encoding used for unicode passwords.
        Defaults to ``cp437``.

    :type max_password_size: int
    :param max_password_size:
        Maximum size of passwords accepted by this context.
        Defaults to (and may not exceed) :data:`nwpass.utils.MAX_PASSWORD_SIZE`;
        larger values are clamped, issuing a :exc:`~nwpass.exc.NwpassConfigWarning`.

    An INI file for this class might look like::

        [nwpass]
        encoding = cp850
        max_password_size = 127
    """
    #===================================================================
    # class attrs
    #===================================================================

    #: option names, in the order they're rendered by to_string()
    known_options = ("encoding", "max_password_size")

    #===================================================================
    # secondary constructors
    #===================================================================
    @classmethod
    def from_string(cls, source, section="nwpass", encoding="utf-8"):
        """create new LoginContext instance from an INI-formatted string.

        :arg source:
            bytes/unicode string containing INI-formatted content.

        :param section:
            option name of section to read from, defaults to ``"nwpass"``.

        :arg encoding:
            optional encoding used when source is bytes, defaults to ``"utf-8"``.

        :returns:
            new LoginContext instance.
        """
        if not isinstance(source, (str, bytes)):
            raise exc.ExpectedTypeError(source, "unicode or bytes", "source")
        self = cls()
        self.load(source, section=section, encoding=encoding)
        return self

    @classmethod
    def from_path(cls, path, section="nwpass", encoding="utf-8"):
        """create new LoginContext instance from an INI-formatted file.

        this functions exactly the same as :meth:`from_string`,
        except that it loads from a local file.
        """
        self = cls()
        self.load_path(path, section=section, encoding=encoding)
        return self

    def copy(self, **kwds):
        "return copy of existing LoginContext instance, with any keywords applied"
        other = LoginContext(**self.to_dict())
        if kwds:
            other.load(kwds, update=True)
        return other

    #===================================================================
    #init
    #===================================================================
    def __init__(self, **kwds):
        self._options = self._norm_options(kwds)

    def __repr__(self):
        return "<LoginContext 0x%0x>" % id(self)

    def __str__(self):
        return self.to_string()

    #===================================================================
    # loading / updating configuration
    #===================================================================
    @staticmethod
    def _parse_ini_stream(stream, section, filename):
        "helper read INI from stream, extract nwpass section as dict"
        p = ConfigParser()
        p.read_file(stream, filename)
        return dict(p.items(section))

    def load_path(self, path, update=False, section="nwpass", encoding="utf-8"):
        """load new configuration into LoginContext from a local file.

        This function is a wrapper for :meth:`load`, which
        loads a configuration string from the local file *path*,
        instead of an in-memory source.
        """
        with open(path, "rt", encoding=encoding) as stream:
            kwds = self._parse_ini_stream(stream, section, path)
        log.debug("loaded %r section from %r", section, path)
        return self.load(kwds, update=update)

    def load(self, source, update=False, section="nwpass", encoding="utf-8"):
        """load new configuration into LoginContext, replacing existing config.

        :arg source:
            source of new configuration; either a mapping
            of option names to values, or an INI-formatted
            unicode/bytes string.

        :type update: bool
        :param update:
            By default, :meth:`load` will replace the existing configuration
            entirely. If ``update=True``, it will preserve any existing
            configuration options that are not overridden by the new source.

        :param section:
            section of INI string to read, ignored for mappings.

        :param encoding:
            encoding used to decode bytes strings, ignored for mappings.

        :raises TypeError:
            If the source cannot be identified.

        :raises KeyError:
            If an unknown option is encountered.

        :raises ValueError:
            If an invalid option value is encountered.

        If an error occurs, the instance keeps the configuration
        it had before the call was made.
        """
        if isinstance(source, (str, bytes)):
            source = to_unicode(source, encoding, errname="source")
            source = self._parse_ini_stream(StringIO(source), section,
                                            "<string>")
        elif not hasattr(source, "items"):
            raise exc.ExpectedTypeError(source, "string or dict", "source")
        if update:
            tmp = source
            source = self.to_dict()
            source.update(tmp)
        self._options = self._norm_options(source)
        log.debug("LoginContext %#x loaded options: %r", id(self), self._options)

    def update(self, **kwds):
        "helper for quickly changing configuration; same as ``load(kwds, update=True)``"
        self.load(kwds, update=True)

    @classmethod
    def _norm_options(cls, source):
        "validate options, filling in defaults"
        for key in source:
            if key not in cls.known_options:
                raise KeyError("unknown LoginContext option: %r" % (key,))

        encoding = source.get("encoding") or netware.DEFAULT_ENCODING
        try:
            _lookup_codec(encoding)
        except LookupError:
            raise ValueError("unknown encoding: %r" % (encoding,))

        limit = source.get("max_password_size")
        if limit is None or limit == "":
            limit = utils.MAX_PASSWORD_SIZE
        elif isinstance(limit, str):
            limit = int(limit)
        if limit < 1:
            raise ValueError("max_password_size must be >= 1: %r" % (limit,))
        if limit > utils.MAX_PASSWORD_SIZE:
            warn("max_password_size is too large (%d > %d), clamping to hard limit" %
                 (limit, utils.MAX_PASSWORD_SIZE), NwpassConfigWarning)
            limit = utils.MAX_PASSWORD_SIZE

        return dict(encoding=encoding, max_password_size=limit)

    #===================================================================
    # reading configuration
    #===================================================================
    @property
    def encoding(self):
        return self._options['encoding']

    @property
    def max_password_size(self):
        return self._options['max_password_size']

    def to_dict(self):
        "return dictionary of the context's configuration"
        return dict(self._options)

    def to_string(self, section="nwpass"):
        "serialize to INI format and return as unicode string"
        parser = ConfigParser()
        parser.add_section(section)
        for key in self.known_options:
            parser.set(section, key, str(self._options[key]))
        buf = StringIO()
        parser.write(buf)
        return buf.getvalue()

    #===================================================================
    # password hash
    #===================================================================
    def hash(self, object_id, secret):
        "return raw 16 byte bindery password hash for secret"
        validate_secret(secret, self.max_password_size)
        return netware.hash_object_password(object_id, secret, self.encoding)

    def encrypt(self, secret, object_id):
        "return :class:`~nwpass.handlers.netware.netware_bindery` hash string for secret"
        validate_secret(secret, self.max_password_size)
        return netware.netware_bindery.encrypt(secret, object_id=object_id,
                                               encoding=self.encoding)

    def verify(self, secret, hash, object_id):
        "verify secret against bindery hash string"
        validate_secret(secret, self.max_password_size)
        return netware.netware_bindery.verify(secret, hash, object_id=object_id,
                                              encoding=self.encoding)

    #===================================================================
    # login
    #===================================================================
    def client_login_hash(self, object_id, key, secret):
        "calculate client side login hash from password"
        validate_secret(secret, self.max_password_size)
        return netware.client_login_hash(object_id, key, secret, self.encoding)

    def server_login_hash(self, key, stored_hash):
        "calculate server side login hash from stored password hash"
        return netware.server_login_hash(key, stored_hash)

    def verify_login(self, key, stored_hash, login_hash):
        "check client login hash against stored password hash"
        return netware.verify_login(key, stored_hash, login_hash)

    #===================================================================
    # eoc
    #===================================================================

#=========================================================
# eof
#=========================================================
