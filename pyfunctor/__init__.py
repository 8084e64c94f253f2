from .functors import Functor, Container, Maybe, Left, Right, IO
from .functions import Func1, identity, compose, curry, fmap
from .accessors import head, prop, safe_head, safe_prop

__all__ = [
    'Functor',
    'Container',
    'Maybe',
    'Left',
    'Right',
    'IO',
    'Func1',
    'identity',
    'compose',
    'curry',
    'fmap',
    'head',
    'prop',
    'safe_head',
    'safe_prop'
]

classes = __all__
