from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .swaddle import Swaddle


class SwaddleError(Exception):
    pass


class PropertyNotFoundError(SwaddleError, LookupError):
    @property
    def property_name(self, /) -> str:
        return self._property_name

    _property_name: str

    def __init__(self, property_name: str, swaddle: Swaddle, /) -> None:
        super().__init__(
            f'There is no property with the name "{property_name}" '
            'in this Swaddle. '
            'Available properties are: '
            f'"{_QUOTED_NAMES_SEPARATOR.join(swaddle.property_names())}".'
        )
        self._property_name = property_name


_QUOTED_NAMES_SEPARATOR: Final = '", "'
