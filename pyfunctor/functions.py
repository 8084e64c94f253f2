from __future__ import annotations
import inspect
from functools import wraps

from .functors import Functor


class Func1:
    def __init__(self, func):
        assert callable(func), f'Func1 expects a callable, got {type(func).__name__}.'
        self.func = func

    def __call__(self, x):
        return self.func(x)

    def compose(self, g) -> Func1:
        return Func1(lambda x: self.func(g(x)))

    def __matmul__(self, g) -> Func1:
        return self.compose(g)

    def __rmatmul__(self, f) -> Func1:
        return Func1(f).compose(self)

    def __repr__(self):
        return f'Func1({getattr(self.func, "__name__", self.func)!r})'


def identity(x):
    return x


def compose(*funcs) -> Func1:
    # compose(f, g, h)(x) == f(g(h(x)))
    composed = Func1(identity)
    for f in funcs:
        composed = composed @ f
    return composed


def _arity(func) -> int:
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    params = inspect.signature(func).parameters.values()
    return sum(1 for p in params if p.kind in positional and p.default is inspect.Parameter.empty)


def curry(func):
    """Collects positional arguments until ``func``'s arity is reached.

        add = curry(lambda x, y: x + y)
        add(1)(2) == add(1, 2) == 3
    """
    arity = _arity(func)

    def accumulate(bound):
        @wraps(func)
        def curried(*args):
            args = bound + args
            if len(args) >= arity:
                return func(*args)
            return accumulate(args)

        return curried

    return accumulate(())


@curry
def fmap(func, functor: Functor) -> Functor:
    if not isinstance(functor, Functor):
        raise TypeError(f'fmap expects a Functor, got {type(functor).__name__}.')
    return functor.map(func)
