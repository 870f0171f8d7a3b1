from __future__ import annotations

from ._core.exceptions import PropertyNotFoundError, SwaddleError
from ._core.missing import MISSING, Missing
from ._core.swaddle import Swaddle

__all__ = [
    'MISSING',
    'Missing',
    'PropertyNotFoundError',
    'Swaddle',
    'SwaddleError',
]

__version__ = '0.1.0'
