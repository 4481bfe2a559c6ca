import logging
import sys

from mirrorfold.System.Log import log, setup_console_logging, setup_file_logging
from mirrorfold.Utils.Permutations import OutOfRangeSelection
from mirrorfold.Variants.mirrorfold import MirrorfoldBoard

USAGE = "usage: python -m mirrorfold [POSITION | all] [debug]"


def main(argv):
    args = list(argv)
    if "debug" in args:
        args.remove("debug")
        setup_console_logging(logging.DEBUG)
    else:
        log.logger.setLevel(logging.WARNING)

    if len(args) > 1:
        print("Unknown argument(s):", repr(args), file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    if args == ["all"]:
        board = MirrorfoldBoard()
        first, last = board.positionRange()
        for position in range(first, last + 1):
            board.positionNumber = position
            print("%3d %s" % (position, board.asFen()))
        return 0

    if args:
        try:
            position = int(args[0])
        except ValueError:
            print(USAGE, file=sys.stderr)
            return 2
        setup = {"position": position}
    else:
        setup = {"setup": True}

    try:
        board = MirrorfoldBoard(**setup)
    except OutOfRangeSelection as err:
        print("Error:", err, file=sys.stderr)
        return 1

    print(board.asFen())
    return 0


if __name__ == "__main__":
    setup_file_logging()
    sys.exit(main(sys.argv[1:]))
