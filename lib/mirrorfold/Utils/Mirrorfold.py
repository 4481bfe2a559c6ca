# Mirrorfold Classic utils
# White's back rank is one ordering of {K, R, N, B, P, P} picked by position
# number, black's is the same rank reversed and in lower case.

from mirrorfold.System.Log import log
from .Permutations import PermutationTable
from .const import RANKS, FILES, WHITE, reprColor, FEN_RANK_SEP, \
    FEN_FIELD_SEP, FEN_EMPTY, FEN_HALFMOVE, FEN_FULLMOVE

# Shared by every caller that does not bring its own table
permutations = PermutationTable()


def toPrimary(rank):
    """ White pieces are upper case """
    return tuple(symbol.upper() for symbol in rank)


def mirror(rank):
    """ Reverses the rank and swaps the case of every piece, so that
        mirror(mirror(rank)) == rank """
    return tuple(symbol.swapcase() for symbol in reversed(rank))


def rankToFen(rank):
    fen = ""
    empty = 0
    for symbol in rank:
        if symbol is None:
            empty += 1
        else:
            if empty > 0:
                fen += str(empty)
                empty = 0
            fen += symbol
    if empty > 0:
        fen += str(empty)
    return fen


def encode(index, table=None):
    """ Returns the starting position FEN for the 1-based position number.
        Raises OutOfRangeSelection when index is not in 1..len(table) """

    if table is None:
        table = permutations

    white = toPrimary(table.get(index))
    black = mirror(white)
    empty = (None,) * FILES

    rows = [rankToFen(black)]
    rows += [rankToFen(empty)] * (RANKS - 2)
    rows.append(rankToFen(white))

    fen = FEN_FIELD_SEP.join((
        FEN_RANK_SEP.join(rows),
        reprColor[WHITE],
        FEN_EMPTY,  # no castling
        FEN_EMPTY,  # no en passant
        FEN_HALFMOVE,
        FEN_FULLMOVE,
    ))
    log.debug("Position %d: %s" % (index, fen), extra={"task": "mirrorfold"})
    return fen


def decodeRanks(fen):
    """ Splits a Mirrorfold starting FEN into its (black, white) back ranks """

    fields = fen.split(FEN_FIELD_SEP)
    if len(fields) != 6:
        raise ValueError("Needs 6 fields in fenstr. Pos(%d)" % len(fields))

    rows = fields[0].split(FEN_RANK_SEP)
    if len(rows) != RANKS:
        raise ValueError("Needs %d slashes in piece placement field. Pos(%d)" %
                         (RANKS - 1, len(rows) - 1))

    empty = rankToFen((None,) * FILES)
    if any(row != empty for row in rows[1:-1]):
        raise ValueError("Only the back ranks may hold pieces: %s" % fields[0])

    black, white = tuple(rows[0]), tuple(rows[-1])
    if len(white) != FILES or white != toPrimary(white):
        raise ValueError("White back rank must be %d upper case pieces: %s" %
                         (FILES, rows[-1]))
    if black != mirror(white):
        raise ValueError("Black back rank %s does not mirror %s" %
                         (rows[0], rows[-1]))
    return black, white


def positionOf(rank, table=None):
    """ Returns the position number whose white back rank is rank """

    if table is None:
        table = permutations
    return table.index(toPrimary(rank))


if __name__ == '__main__':
    for i in (1, 200, 360):
        print(encode(i))
