import json
from dataclasses import dataclass, field, asdict, fields
from enum import Enum
from pprint import PrettyPrinter
from typing import *


class FunctorKind(Enum):
    Container = 'container'
    Maybe = 'maybe'
    Right = 'right'
    Left = 'left'
    IO = 'io'


def _default_samples() -> List[Any]:
    return [0, 4, -3.5, 'Shady Ln.', [1, 2, 3], {'balance': 200}, None]


@dataclass
class LawConfig:
    kinds: List[FunctorKind] = field(default_factory=lambda: list(FunctorKind))
    samples: List[Any] = field(default_factory=_default_samples)
    rounds: int = 1
    mute_pbar: bool = False

    def __post_init__(self):
        known = {k.value for k in FunctorKind}
        for k in self.kinds:
            if not isinstance(k, FunctorKind) and k not in known:
                raise RuntimeError(f'unsupported functor kind: {k}')
        self.kinds = [FunctorKind(k) for k in self.kinds]
        assert self.rounds >= 1, f'rounds must be positive, got {self.rounds}.'

    def show(self):
        d = asdict(self)
        d['kinds'] = [k.value for k in self.kinds]
        PrettyPrinter(indent=2).pprint(d)


def load_config(path: Optional[str] = None, **kwargs) -> LawConfig:
    params = dict()
    if path is not None:
        with open(path, 'r', encoding='utf-8') as f:
            params.update(json.load(f))
    params.update({k: v for k, v in kwargs.items() if v is not None})

    known = {f.name for f in fields(LawConfig)}
    for k in params:
        if k not in known:
            raise RuntimeError(f'unsupported config key: {k}')
    return LawConfig(**params)
