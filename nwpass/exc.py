"""nwpass.exc -- exceptions & warnings raised by nwpass"""
#==========================================================================
# exceptions
#==========================================================================
class PasswordSizeError(ValueError):
    """Error raised if the password provided exceeds the limit set by nwpass.

    The stretching step of the bindery hash is linear in the size of the
    password, so an application accepting passwords from untrusted sources
    could be made to do an arbitrary amount of work.

    Because of this, nwpass enforces a maximum of 4096 bytes.
    This error will be thrown if a password larger than
    this is provided to any of the functions in nwpass.

    Applications wishing to use a different limit should set the
    ``NWPASS_MAX_PASSWORD_SIZE`` environmental variable before nwpass
    is loaded, or configure a lower limit on a
    :class:`~nwpass.context.LoginContext`.
    """
    def __init__(self, limit=None):
        msg = "password exceeds maximum allowed size"
        if limit is not None:
            msg = "%s (%d bytes)" % (msg, limit)
        ValueError.__init__(self, msg)

#==========================================================================
# warnings
#==========================================================================
class NwpassWarning(UserWarning):
    """base class for nwpass's user warnings"""

class NwpassConfigWarning(NwpassWarning):
    """Warning issued when non-fatal issue is found related to the configuration
    of a :class:`~nwpass.context.LoginContext` instance.

    This occurs when the context is configured with a ``max_password_size``
    which exceeds the hard limit imposed by ``NWPASS_MAX_PASSWORD_SIZE``.
    The value is clamped to the hard limit, and the code will perform
    correctly; but the warning is issued as a sign the configuration
    may need updating.
    """

#==========================================================================
# error constructors
#
# note: these functions are used by nwpass to raise common error messages.
# They are currently just functions which return TypeError / ValueError,
# rather than subclasses, since callers rarely need anything more specific.
#==========================================================================

def _get_name(handler):
    return handler.name if handler else "<unnamed>"

#----------------------------------------------------------------
# encrypt/verify parameter errors
#----------------------------------------------------------------
def type_name(value):
    "return pretty-printed string containing name of value's type"
    cls = value.__class__
    if cls.__module__ and cls.__module__ not in ["__builtin__", "builtins"]:
        return "%s.%s" % (cls.__module__, cls.__name__)
    elif value is None:
        return 'None'
    else:
        return cls.__name__

def ExpectedTypeError(value, expected, param):
    "error message when param was supposed to be one type, but found another"
    # NOTE: value is never displayed, since it may sometimes be a password.
    name = type_name(value)
    return TypeError("%s must be %s, not %s" % (param, expected, name))

def ExpectedStringError(value, param):
    "error message when param was supposed to be unicode or bytes"
    return ExpectedTypeError(value, "unicode or bytes", param)

def ExpectedSizeError(value, size, param):
    "error message when a fixed-size byte buffer has the wrong length"
    return ValueError("%s must be exactly %d bytes, not %d" %
                      (param, size, len(value)))

#----------------------------------------------------------------
# errors when parsing hashes
#----------------------------------------------------------------
def InvalidHashError(handler=None):
    "error raised if unrecognized hash provided to handler"
    return ValueError("not a valid %s hash" % _get_name(handler))

#==========================================================================
# eof
#==========================================================================
