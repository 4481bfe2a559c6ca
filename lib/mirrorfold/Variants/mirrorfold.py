# Mirrorfold Classic

from mirrorfold.System import conf
from mirrorfold.Utils.const import MIRRORFOLDCHESS, VARIANTS_SHUFFLE, RANKS, FILES
from mirrorfold.Utils import Mirrorfold


class MirrorfoldBoard:
    """:Description: A 6x6 variant where white's back rank is one of the
        unique orderings of {K, R, N, B, P, P}, picked by position number,
        and black's back rank is its horizontal mirror.
    """
    variant = MIRRORFOLDCHESS
    __desc__ = (
        "A 6x6 variant in which each side's back rank is generated from {K, R, N, B, P, P}.\n" +
        "* Black's rank is the horizontal mirror (reverse order, lowercase) of White's\n" +
        "* No castling\n" +
        "* Victory by king capture")
    name = "Mirrorfold Classic"
    cecp_name = "mirrorfold"
    invented = "2023"
    tags = ("Chess Variant", "Random", "Mirrorfold")
    need_initial_board = True
    standard_rules = False
    variant_group = VARIANTS_SHUFFLE
    castling = "None"
    RANKS = RANKS
    FILES = FILES

    def __init__(self, setup=False, position=None, table=None):
        self.table = Mirrorfold.permutations if table is None else table
        if position is None:
            if setup is True:
                position = conf.get("positionNumber", section="Mirrorfold")
            else:
                position = 1
        self.positionNumber = position

    def _get_position(self):
        return self._position

    def _set_position(self, position):
        # get() validates and raises OutOfRangeSelection
        self.table.get(position)
        self._position = position

    positionNumber = property(_get_position, _set_position)

    def positionRange(self):
        return 1, len(self.table)

    def asFen(self):
        return Mirrorfold.encode(self.positionNumber, self.table)

    def lookupGameVariable(self, variableName):
        name = variableName.upper()
        if name == "ARRAY":
            return self.asFen()
        if name == "POSITIONNUMBER":
            return self.positionNumber
        if name == "CASTLING":
            return self.castling
        raise KeyError(variableName)

    def __repr__(self):
        return "<%s #%d %s>" % (self.__class__.__name__, self.positionNumber,
                                self.asFen())


if __name__ == '__main__':
    board = MirrorfoldBoard(True)
    print(board.asFen())
