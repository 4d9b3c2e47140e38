"""
Tests for the version information exported by L{formhelpers}.
"""

from twisted.trial.unittest import TestCase

import formhelpers


class VersionTests(TestCase):
    def test_version(self):
        """
        L{formhelpers.version} describes the same release as
        L{formhelpers.__version__}.
        """
        self.assertEqual(formhelpers.version.package, 'formhelpers')
        self.assertEqual(formhelpers.version.base(), formhelpers.__version__)
