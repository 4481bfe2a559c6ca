""" Enumeration of the distinct orderings of a back rank multiset.

    The table is sorted, so a 1-based position number always names the same
    back rank, in this process and in any other one. """

from bisect import bisect_left
from threading import Lock

from mirrorfold.System.Log import log
from .const import MIRRORFOLD_PIECES


class OutOfRangeSelection(IndexError):
    def __init__(self, index, size):
        IndexError.__init__(self, "position %r is outside 1..%d" % (index, size))
        self.index = index
        self.size = size


def unique_permutations(symbols):
    """ Returns every distinct ordering of symbols as a list of tuples.
        Equal symbols are tried once per position, so no ordering is produced
        twice and nothing has to be filtered afterwards. """

    found = []

    def extend(prefix, pool):
        if not pool:
            found.append(prefix)
            return
        tried = set()
        for i, symbol in enumerate(pool):
            if symbol in tried:
                continue
            tried.add(symbol)
            extend(prefix + (symbol,), pool[:i] + pool[i + 1:])

    extend((), tuple(symbols))
    return found


class PermutationTable:
    """ Lazily built, sorted list of the unique orderings of a multiset.

        The first build() runs under a lock, concurrent first callers wait for
        it and then all see the finished table. """

    def __init__(self, symbols=MIRRORFOLD_PIECES):
        self.symbols = tuple(symbols)
        self._perms = None
        self._lock = Lock()

    def build(self):
        perms = self._perms
        if perms is not None:
            return perms

        with self._lock:
            if self._perms is None:
                perms = sorted(unique_permutations(self.symbols))
                log.debug("Built %d unique orderings of %s" %
                          (len(perms), "".join(self.symbols)),
                          extra={"task": "permutations"})
                self._perms = tuple(perms)
        return self._perms

    def isBuilt(self):
        return self._perms is not None

    def get(self, index):
        """ Returns the ordering at the 1-based position index """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("position must be an int, not %s" %
                            type(index).__name__)

        perms = self.build()
        if index < 1 or index > len(perms):
            log.warning("Rejected position %s, table has %d entries" %
                        (index, len(perms)), extra={"task": "permutations"})
            raise OutOfRangeSelection(index, len(perms))
        return perms[index - 1]

    def index(self, perm):
        """ Returns the 1-based position of perm, ValueError if absent """
        perms = self.build()
        perm = tuple(perm)
        lo = bisect_left(perms, perm)
        if lo < len(perms) and perms[lo] == perm:
            return lo + 1
        raise ValueError("%s is not an ordering of %s" %
                         ("".join(perm), "".join(self.symbols)))

    def __len__(self):
        return len(self.build())

    def __iter__(self):
        return iter(self.build())

    def __repr__(self):
        state = len(self._perms) if self._perms is not None else "unbuilt"
        return "<PermutationTable %s %s>" % ("".join(self.symbols), state)
