"""helpers for nwpass unittests"""
#=========================================================
#imports
#=========================================================
#core
import atexit
import logging; log = logging.getLogger(__name__)
import os
import tempfile
import unittest
import warnings
#pkg
#local
__all__ = [
    'mktemp',
    'TestCase',
]

#=========================================================
#custom test base
#=========================================================
class TestCase(unittest.TestCase):
    """nwpass-specific test case class

    * ``descriptionPrefix`` is prepended to every test's description
    * every warning is shown while a test runs, and the filters
      are restored afterwards
    """
    # string prepended to all tests in TestCase
    descriptionPrefix = None

    def shortDescription(self):
        desc = super(TestCase, self).shortDescription()
        prefix = self.descriptionPrefix
        if prefix:
            desc = "%s: %s" % (prefix, desc or str(self))
        return desc

    def setUp(self):
        super(TestCase, self).setUp()
        ctx = warnings.catch_warnings()
        ctx.__enter__()
        self.addCleanup(ctx.__exit__)
        warnings.simplefilter("always")

    def assertWarningList(self, wlist, categories=()):
        "check warnings recorded by catch_warnings() match categories, then clear list"
        found = [entry.category for entry in wlist]
        self.assertEqual(found, list(categories), "unexpected warnings: %r" %
                         ([str(entry.message) for entry in wlist],))
        del wlist[:]

#=========================================================
#temp files
#=========================================================
tmp_files = []

def _clean_tmp_files():
    for path in tmp_files:
        if os.path.exists(path):
            os.remove(path)
atexit.register(_clean_tmp_files)

def mktemp(*args, **kwds):
    "create temp file, removed when the test run exits; returns path"
    fd, path = tempfile.mkstemp(*args, **kwds)
    tmp_files.append(path)
    os.close(fd)
    return path

#=========================================================
#eof
#=========================================================
