from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from typing_extensions import Self, final

from .exceptions import PropertyNotFoundError
from .missing import MISSING
from .object_like import is_object_like, to_fresh_storage, to_storage


@final
class Swaddle:
    @classmethod
    def wrap_array(
        cls, config: Mapping[Any, Any], /, deep: bool = True
    ) -> Self:
        return cls._from_storage(to_fresh_storage(config), deep)

    @classmethod
    def wrap_object(cls, config: Any, /, deep: bool = True) -> Self:
        return cls._from_storage(to_storage(config), deep)

    @property
    def deep(self, /) -> bool:
        return self._deep

    def get_property(self, name: str, /, default: Any = MISSING) -> Any:
        if self.has_property(name):
            result = self._underlying[name]
            if self._deep and is_object_like(result):
                # nested swaddles are always deep
                result = type(self).wrap_object(result)
            return result
        # explicit ``None`` default counts as no default
        if default is not MISSING and default is not None:
            return default
        raise PropertyNotFoundError(name, self)

    def has_property(self, name: str, /) -> bool:
        return self._underlying.get(name) is not None

    def property_names(self, /) -> list[str]:
        return list(self._underlying)

    def remove_property(self, name: str, /, silent: bool = False) -> None:
        if self.has_property(name):
            del self._underlying[name]
        elif not silent:
            raise PropertyNotFoundError(name, self)

    def set_property(self, name: str, /, value: Any) -> None:
        self._underlying[name] = value

    def unwrap(self, /) -> MutableMapping[str, Any]:
        return self._underlying

    _deep: bool
    _underlying: MutableMapping[str, Any]

    __slots__ = ('_deep', '_underlying')

    @classmethod
    def _from_storage(
        cls, underlying: MutableMapping[str, Any], deep: bool, /
    ) -> Self:
        self = super().__new__(cls)
        self._deep, self._underlying = bool(deep), underlying
        return self

    def __new__(cls, /, *_args: Any, **_kwargs: Any) -> Self:
        raise TypeError(
            f'{cls.__qualname__!r} should be created '
            'with `wrap_array` or `wrap_object`.'
        )

    def __eq__(self, other: Any, /) -> Any:
        return (
            (
                self._deep is other._deep
                and self._underlying == other._underlying
            )
            if isinstance(other, type(self))
            else NotImplemented
        )

    def __repr__(self, /) -> str:
        return (
            f'{type(self).__qualname__}.wrap_array('
            f'{dict(self._underlying)!r}, deep={self._deep!r}'
            ')'
        )

    def __reduce__(self, /) -> tuple[Any, ...]:
        return type(self)._from_storage, (self._underlying, self._deep)
