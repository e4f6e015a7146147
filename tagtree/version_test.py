# encoding=utf-8
import unittest

import tagtree.version
from tagtree.version import get_version_tuple


class TestVersion(unittest.TestCase):
    def test_valid_version_str(self):
        self.assertEqual(
            tagtree.version.version_info,
            get_version_tuple(tagtree.version.__version__)
        )

    def test_version_string_builder(self):
        self.assertEqual(
            (0, 0, 0, 'final', 0),
            get_version_tuple('0.0')
        )
        self.assertEqual(
            (0, 1, 1, 'final', 0),
            get_version_tuple('0.1.1')
        )
        self.assertEqual(
            (0, 1, 1, 'alpha', 0),
            get_version_tuple('0.1.1a0')
        )
        self.assertEqual(
            (0, 1, 0, 'candidate', 3),
            get_version_tuple('0.1c3')
        )
        self.assertEqual(
            (100000, 0, 0, 'final', 0),
            get_version_tuple('100000.0')
        )

    def test_invalid_version_str(self):
        self.assertRaises(ValueError, get_version_tuple, 'dev')
        self.assertRaises(ValueError, get_version_tuple, '1.0-snapshot')
