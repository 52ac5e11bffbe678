"""nwpass setup script"""
#=========================================================
#init script env - ensure cwd = root of source dir
#=========================================================
import os
root_dir = os.path.abspath(os.path.join(__file__,".."))
os.chdir(root_dir)

#=========================================================
#imports
#=========================================================
import re

from setuptools import setup

#=========================================================
#version string
#=========================================================
with open(os.path.join(root_dir, "nwpass", "__init__.py")) as vh:
    VERSION = re.search(r'^__version__\s*=\s*"(.*?)"\s*$', vh.read(), re.M).group(1)

#=========================================================
#static text
#=========================================================
SUMMARY = "NetWare 3.x bindery password hashing & login encryption"

DESCRIPTION = """\
nwpass implements the password hash stored in the NetWare 3.x bindery,
and the session-key based login hash exchanged between NetWare clients
and servers. It's designed to be useful for any task from checking a
password against a hash found in a bindery dump, to authenticating
clients in a server emulator.

The algorithms are weak by modern standards; nwpass exists only to
interoperate with existing clients, servers and bindery files.
"""

KEYWORDS = "password hash netware novell bindery ncp login"

#=========================================================
#config setup
#=========================================================
config = dict(
    #package info
    packages = [
        "nwpass",
            "nwpass.handlers",
            "nwpass.tests",
            "nwpass.utils",
        ],
    zip_safe=True,
    python_requires = ">=3.6",

    #metadata
    name = "nwpass",
    version = VERSION,
    license = "BSD",

    description = SUMMARY,
    long_description = DESCRIPTION,
    keywords = KEYWORDS,
    classifiers = [
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries",
    ],

    extras_require = {
        "test": ["pytest"],
    },
)

#=========================================================
#build
#=========================================================
setup(**config)

#=========================================================
#EOF
#=========================================================
