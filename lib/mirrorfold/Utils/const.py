# -*- coding: UTF-8 -*-

# Player colors
WHITE, BLACK = range(2)
reprColor = ["w", "b"]

# Chess variants
MIRRORFOLDCHESS, = range(1)

# Chess variant groups
VARIANTS_SHUFFLE, = range(1)

# Board geometry
RANKS = 6
FILES = 6

# Back rank multiset, one duplicated pair
MIRRORFOLD_PIECES = ("K", "R", "N", "B", "P", "P")

# FEN fields
FEN_RANK_SEP = "/"
FEN_FIELD_SEP = " "
FEN_EMPTY = "-"
FEN_HALFMOVE = "0"
FEN_FULLMOVE = "1"
