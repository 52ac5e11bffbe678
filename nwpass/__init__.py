"""nwpass - NetWare 3.x bindery password hashing & login encryption"""

__version__ = "1.0"
