from typing import *

from .functions import curry
from .functors import Maybe


def head(xs):
    # first element of any non-mapping iterable, None otherwise
    if isinstance(xs, Sequence):
        return xs[0] if len(xs) > 0 else None
    if isinstance(xs, Iterable) and not isinstance(xs, Mapping):
        return next(iter(xs), None)
    return None


@curry
def prop(name: Hashable, obj):
    # missing keys and attributes both read as None
    if isinstance(obj, Mapping):
        return obj.get(name)
    if not isinstance(name, str):
        return None
    return getattr(obj, name, None)


def safe_head(xs) -> Maybe:
    return Maybe.of(head(xs))


@curry
def safe_prop(name: Hashable, obj) -> Maybe:
    return Maybe.of(prop(name, obj))
