"""nwpass.__main__ -- command line helper tool

provides quick access to the bindery hash & login hash functions,
mainly for checking values against a live server or a bindery dump.

* object ids may be given in any integer notation python accepts
  (e.g. ``0x05000026``).
* session keys, stored hashes, and login hashes are given as hexidecimal.
"""
#=========================================================
#imports
#=========================================================
# core
from binascii import hexlify, unhexlify, Error as _HexError
import logging; log = logging.getLogger(__name__)
from optparse import OptionParser
import sys
# package
from nwpass import __version__
from nwpass.context import LoginContext
from nwpass.utils.nwcrypt import DIGEST_SIZE, KEY_SIZE

vstr = "nwpass " + __version__

#=========================================================
# general support funcs
#=========================================================
def _add_context_options(p):
    "add options shared by all commands which use a LoginContext"
    p.add_option("-c", "--config", dest="config", default=None,
                 metavar="PATH",
                 help="load LoginContext options from INI file",
                 )
    p.add_option("-e", "--encoding", dest="encoding", default=None,
                 help="specify encoding for the password (default cp437)",
                 )

def _load_context(opts):
    if opts.config:
        ctx = LoginContext.from_path(opts.config)
    else:
        ctx = LoginContext()
    if opts.encoding:
        ctx.update(encoding=opts.encoding)
    return ctx

def _parse_object_id(p, value):
    try:
        return int(value, 0)
    except ValueError:
        p.error("invalid object id: %r" % (value,))

def _parse_hex(p, value, size, name):
    try:
        result = unhexlify(value)
    except (_HexError, ValueError):
        p.error("%s must be hexidecimal: %r" % (name, value))
    if len(result) != size:
        p.error("%s must be %d hex digits: %r" % (name, 2*size, value))
    return result

def _read_password(password):
    if password is None:
        import getpass
        password = getpass.getpass("Password: ")
    return password

#=========================================================
# password hash commands
#=========================================================
def hash_cmd(args):
    """calculate bindery password hash"""
    p = OptionParser(prog="nwpass hash", version=vstr,
                     usage="%prog [options] <object_id> [<password>]",
                     description="This subcommand will hash the specified password, "
                                 "salted by the object id, and output the hash as hexidecimal.")
    _add_context_options(p)

    opts, args = p.parse_args(args)
    if not args:
        p.error("no object id specified")
    object_id = _parse_object_id(p, args.pop(0))
    password = args.pop(0) if args else None
    if args:
        p.error("Unexpected positional arguments")

    ctx = _load_context(opts)
    password = _read_password(password)
    try:
        print(ctx.encrypt(password, object_id))
    except ValueError as err:
        print("error: %s" % (err,))
        return 1
    return 0

def verify_cmd(args):
    """verify password against bindery password hash"""
    p = OptionParser(prog="nwpass verify", version=vstr,
                     usage="%prog [options] <object_id> <hash> [<password>]",
                     description="This subcommand will attempt to verify the hash against "
                                 "the specified password, and output success or failure.")
    _add_context_options(p)

    opts, args = p.parse_args(args)
    if not args:
        p.error("no object id specified")
    object_id = _parse_object_id(p, args.pop(0))
    if not args:
        p.error("no hash specified")
    hash = args.pop(0)
    password = args.pop(0) if args else None
    if args:
        p.error("Unexpected positional arguments")

    ctx = _load_context(opts)
    password = _read_password(password)
    try:
        result = ctx.verify(password, hash, object_id)
    except ValueError as err:
        print("error: %s" % (err,))
        return 1
    if result:
        print("password VERIFIED successfully.")
        return 0
    else:
        print("password FAILED to verify.")
        return 1

#=========================================================
# login commands
#=========================================================
def login_cmd(args):
    """calculate client login hash from password"""
    p = OptionParser(prog="nwpass login", version=vstr,
                     usage="%prog [options] <object_id> <key> [<password>]",
                     description="This subcommand will calculate the login hash a client "
                                 "sends for the given session key and password.")
    _add_context_options(p)

    opts, args = p.parse_args(args)
    if not args:
        p.error("no object id specified")
    object_id = _parse_object_id(p, args.pop(0))
    if not args:
        p.error("no session key specified")
    key = _parse_hex(p, args.pop(0), KEY_SIZE, "session key")
    password = args.pop(0) if args else None
    if args:
        p.error("Unexpected positional arguments")

    ctx = _load_context(opts)
    password = _read_password(password)
    try:
        result = ctx.client_login_hash(object_id, key, password)
    except ValueError as err:
        print("error: %s" % (err,))
        return 1
    print(hexlify(result).decode("ascii"))
    return 0

def server_login_cmd(args):
    """calculate server login hash from stored hash"""
    p = OptionParser(prog="nwpass server-login", version=vstr,
                     usage="%prog [options] <key> <hash>",
                     description="This subcommand will calculate the login hash a server "
                                 "expects for the given session key and stored password hash.")

    opts, args = p.parse_args(args)
    if not args:
        p.error("no session key specified")
    key = _parse_hex(p, args.pop(0), KEY_SIZE, "session key")
    if not args:
        p.error("no hash specified")
    stored_hash = _parse_hex(p, args.pop(0), DIGEST_SIZE, "hash")
    if args:
        p.error("Unexpected positional arguments")

    result = LoginContext().server_login_hash(key, stored_hash)
    print(hexlify(result).decode("ascii"))
    return 0

#=========================================================
# main
#=========================================================
commands = {
    "hash": hash_cmd,
    "verify": verify_cmd,
    "login": login_cmd,
    "server-login": server_login_cmd,
}

def _print_avail():
    print("Available commands:")
    for name, func in sorted(commands.items()):
        doc = getattr(func, "__doc__", None)
        doc = doc.splitlines()[0] if doc else ""
        print(" %-14s %s" % (name, doc))

def _print_usage():
    print("nwpass %s Command Line Helper\n"
          "Usage: python -m nwpass <command> [options|--help]\n" % (__version__,))
    _print_avail()

def main(args):
    if not args:
        _print_usage()
        return 1
    cmd = args[0]
    if cmd in ["help", "-h", "--help"]:
        _print_usage()
        return 0
    elif cmd in ["version", "--version", "-v"]:
        print(vstr)
        return 0
    func = commands.get(cmd)
    if not func:
        print("Unknown command: %s\n" % (cmd,))
        _print_avail()
        return 1
    log.debug("running %r command", cmd)
    try:
        return func(args[1:])
    except (SystemExit, KeyboardInterrupt):
        raise
    except Exception:
        print("\n\nAn internal error has occurred:\n"
              "-------------------------------")
        sys.__excepthook__(*sys.exc_info())
        return 1

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

#=========================================================
# eof
#=========================================================
