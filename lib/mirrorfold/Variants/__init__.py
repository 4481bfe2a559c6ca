
from mirrorfold.Utils.const import MIRRORFOLDCHESS

from .mirrorfold import MirrorfoldBoard


variants = {MIRRORFOLDCHESS: MirrorfoldBoard,
            }

name2variant = dict([(v.cecp_name.capitalize(), v) for v in variants.values()])
