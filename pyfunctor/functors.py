from typing import *


class Functor:
    """Anything exposing ``map``.

    ``map`` must satisfy the functor laws:
        x.map(identity) == x
        x.map(f).map(g) == x.map(compose(g, f))
    """
    __slots__ = ()

    def map(self, func):
        raise NotImplementedError(f'{self.__class__.__name__} is not implemented.')


class _Box(Functor):
    __slots__ = ('_value',)

    def __init__(self, value):
        super(_Box, self).__init__()
        object.__setattr__(self, '_value', value)

    @classmethod
    def of(cls, value):
        return cls(value)

    @property
    def value(self):
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable.')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable.')

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._value == other._value

    __hash__ = None

    def __repr__(self):
        return f'{self.__class__.__name__}({self._value!r})'


class Container(_Box):
    __slots__ = ()

    def map(self, func: Callable) -> 'Container':
        return Container(func(self._value))


class Maybe(_Box):
    # None is the only absent marker
    __slots__ = ()

    @classmethod
    def nothing(cls) -> 'Maybe':
        return cls(None)

    @property
    def is_nothing(self) -> bool:
        return self._value is None

    def map(self, func: Callable) -> 'Maybe':
        if self.is_nothing:
            return Maybe.nothing()
        return Maybe(func(self._value))


class Left(_Box):
    __slots__ = ()

    def map(self, _):
        return self


class Right(_Box):
    __slots__ = ()

    def map(self, func: Callable) -> 'Right':
        return Right(func(self._value))


class IO(Functor):
    __slots__ = ('_thunk',)

    def __init__(self, thunk: Callable[[], Any]):
        super(IO, self).__init__()
        assert callable(thunk), f'IO expects a thunk, got {type(thunk).__name__}.'
        object.__setattr__(self, '_thunk', thunk)

    @classmethod
    def of(cls, value):
        return cls(lambda: value)

    def __setattr__(self, name, value):
        raise AttributeError('IO is immutable.')

    def __delattr__(self, name):
        raise AttributeError('IO is immutable.')

    def map(self, func: Callable) -> 'IO':
        thunk = self._thunk
        return IO(lambda: func(thunk()))

    def unsafe_perform_io(self):
        return self._thunk()

    def __repr__(self):
        return 'IO(?)'
