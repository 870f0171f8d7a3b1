from __future__ import annotations

import enum
from typing import Final, Literal


class Missing(enum.Enum):
    DEFAULT = enum.auto()

    def __repr__(self, /) -> str:
        return 'MISSING'


MISSING: Final[Literal[Missing.DEFAULT]] = Missing.DEFAULT
