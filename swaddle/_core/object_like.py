from __future__ import annotations

import functools
import types
from collections.abc import Mapping, MutableMapping
from typing import Any


@functools.singledispatch
def is_object_like(_value: Any, /) -> bool:
    return False


@is_object_like.register(MutableMapping)
@is_object_like.register(types.SimpleNamespace)
def _(_value: Any, /) -> bool:
    return True


@functools.singledispatch
def to_storage(value: Any, /) -> MutableMapping[str, Any]:
    raise TypeError(
        'Expected an object-like value (mutable mapping or namespace), '
        f'but got {type(value).__qualname__!r}.'
    )


@to_storage.register(MutableMapping)
def _(value: MutableMapping[str, Any], /) -> MutableMapping[str, Any]:
    return value


@to_storage.register(types.SimpleNamespace)
def _(value: types.SimpleNamespace, /) -> MutableMapping[str, Any]:
    result = vars(value)
    assert isinstance(result, dict), result
    return result


@functools.singledispatch
def to_fresh_storage(value: Any, /) -> MutableMapping[str, Any]:
    raise TypeError(
        f'Expected a mapping, but got {type(value).__qualname__!r}.'
    )


@to_fresh_storage.register(Mapping)
def _(value: Mapping[Any, Any], /) -> MutableMapping[str, Any]:
    return {str(key): item_value for key, item_value in value.items()}
