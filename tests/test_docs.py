"""Test the examples in the docstrings."""

import doctest
import unittest

from curie_index import api, trie, utils


class TestDocstrings(unittest.TestCase):
    """Test the examples in the docstrings."""

    def test_examples(self) -> None:
        """Test the docstring examples in each module give the documented output."""
        for module in [api, trie, utils]:
            with self.subTest(module=module.__name__):
                results = doctest.testmod(module)
                self.assertLess(0, results.attempted)
                self.assertEqual(0, results.failed)
