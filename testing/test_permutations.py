import threading
import unittest
from collections import Counter
from unittest import mock

from mirrorfold.Utils import Permutations
from mirrorfold.Utils.Permutations import PermutationTable, OutOfRangeSelection, \
    unique_permutations
from mirrorfold.Utils.const import MIRRORFOLD_PIECES


class UniquePermutationsTestCase(unittest.TestCase):
    def testCount(self):
        """Testing the number of unique orderings of {K, R, N, B, P, P}"""

        perms = unique_permutations(MIRRORFOLD_PIECES)
        self.assertEqual(len(perms), 360)
        self.assertEqual(len(set(perms)), 360)

    def testSameMultiset(self):
        """Testing every ordering uses the pieces of the multiset exactly"""

        pieces = Counter(MIRRORFOLD_PIECES)
        for perm in unique_permutations(MIRRORFOLD_PIECES):
            self.assertEqual(Counter(perm), pieces)

    def testSmallMultisets(self):
        self.assertEqual(unique_permutations(()), [()])
        self.assertEqual(unique_permutations("PP"), [("P", "P")])
        self.assertEqual(sorted(unique_permutations("ABA")),
                         [("A", "A", "B"), ("A", "B", "A"), ("B", "A", "A")])
        self.assertEqual(len(unique_permutations("ABCD")), 24)


class PermutationTableTestCase(unittest.TestCase):
    def setUp(self):
        self.table = PermutationTable()

    def testLazyBuild(self):
        self.assertFalse(self.table.isBuilt())
        self.assertEqual(len(self.table), 360)
        self.assertTrue(self.table.isBuilt())

    def testBuildOnce(self):
        with mock.patch.object(Permutations, "unique_permutations",
                               wraps=unique_permutations) as generate:
            first = self.table.build()
            second = self.table.build()
            self.table.get(1)
            self.table.get(360)
        self.assertIs(first, second)
        self.assertEqual(generate.call_count, 1)

    def testSorted(self):
        """Testing the table is in lexicographic order"""

        perms = list(self.table)
        self.assertEqual(perms, sorted(perms))
        self.assertEqual("".join(self.table.get(1)), "BKNPPR")
        self.assertEqual("".join(self.table.get(2)), "BKNPRP")
        self.assertEqual("".join(self.table.get(61)), "KBNPPR")
        self.assertEqual("".join(self.table.get(360)), "RPPNKB")

    def testStable(self):
        other = PermutationTable()
        for index in (1, 17, 200, 359, 360):
            self.assertEqual(self.table.get(index), self.table.get(index))
            self.assertEqual(self.table.get(index), other.get(index))

    def testIndependentTables(self):
        other = PermutationTable()
        self.table.build()
        self.assertFalse(other.isBuilt())

    def testOutOfRange(self):
        for index in (0, -1, 361, 1000):
            with self.assertRaises(OutOfRangeSelection) as cm:
                self.table.get(index)
            self.assertEqual(cm.exception.index, index)
            self.assertEqual(cm.exception.size, 360)
        self.assertTrue(issubclass(OutOfRangeSelection, IndexError))

    def testOutOfRangeLogged(self):
        with self.assertLogs("mirrorfold", level="WARNING") as cm:
            with self.assertRaises(OutOfRangeSelection):
                self.table.get(361)
        self.assertIn("361", cm.output[0])

    def testNotAnInt(self):
        for index in ("1", 1.0, None, True):
            with self.assertRaises(TypeError):
                self.table.get(index)

    def testIndex(self):
        for position in (1, 42, 200, 360):
            self.assertEqual(self.table.index(self.table.get(position)), position)
        self.assertEqual(self.table.index("BKNPPR"), 1)
        with self.assertRaises(ValueError):
            self.table.index("KKNPPR")
        with self.assertRaises(ValueError):
            self.table.index("BKNPP")

    def testOtherMultiset(self):
        table = PermutationTable("AAB")
        self.assertEqual(len(table), 3)
        self.assertEqual(table.get(1), ("A", "A", "B"))
        self.assertEqual(table.get(3), ("B", "A", "A"))
        with self.assertRaises(OutOfRangeSelection):
            table.get(4)

    def testConcurrentFirstUse(self):
        """Testing racing first callers trigger a single build"""

        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(self.table.get(200))

        with mock.patch.object(Permutations, "unique_permutations",
                               wraps=unique_permutations) as generate:
            threads = [threading.Thread(target=worker) for i in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()

        self.assertEqual(generate.call_count, 1)
        self.assertEqual(len(results), 8)
        self.assertEqual(len(set(results)), 1)


if __name__ == '__main__':
    unittest.main()
