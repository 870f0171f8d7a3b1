import re

import swaddle
from swaddle import MISSING, Missing


def test_exports() -> None:
    assert [
        name for name in swaddle.__all__ if not hasattr(swaddle, name)
    ] == []


def test_version() -> None:
    assert re.fullmatch(r'\d+\.\d+\.\d+', swaddle.__version__) is not None


def test_missing() -> None:
    assert isinstance(MISSING, Missing)
    assert list(Missing) == [MISSING]
    assert repr(MISSING) == 'MISSING'
    assert MISSING is not None
