import argparse
from typing import *

from tabulate import tabulate
from tqdm import tqdm

from pyfunctor import Container, Maybe, Left, Right, IO, Functor, identity, compose
from law_config import FunctorKind, LawConfig, load_config

_CONSTRUCTORS = {
    FunctorKind.Container: Container.of,
    FunctorKind.Maybe: Maybe.of,
    FunctorKind.Right: Right.of,
    FunctorKind.Left: Left.of,
    FunctorKind.IO: IO.of,
}


def wrap(kind: FunctorKind, value) -> Functor:
    if kind not in _CONSTRUCTORS:
        raise RuntimeError(f'unsupported functor kind: {kind}')
    return _CONSTRUCTORS[kind](value)


def observe(functor: Functor):
    # IO only has a value once it runs
    if isinstance(functor, IO):
        return functor.unsafe_perform_io()
    return type(functor), functor.value


def check_identity(kind: FunctorKind, value) -> bool:
    return observe(wrap(kind, value).map(identity)) == observe(wrap(kind, value))


def check_composition(kind: FunctorKind, value, f: Callable = repr, g: Callable = len) -> bool:
    lhs = wrap(kind, value).map(f).map(g)
    rhs = wrap(kind, value).map(compose(g, f))
    return observe(lhs) == observe(rhs)


def run(config: LawConfig) -> Dict[str, Dict[str, int]]:
    summary = {kind.value: {'identity': 0, 'composition': 0, 'total': 0} for kind in config.kinds}
    total = config.rounds * len(config.kinds) * len(config.samples)

    if not config.mute_pbar:
        pbar = tqdm(total=total, desc='(laws)')

    for _ in range(config.rounds):
        for kind in config.kinds:
            for value in config.samples:
                stats = summary[kind.value]
                stats['identity'] += int(check_identity(kind, value))
                stats['composition'] += int(check_composition(kind, value))
                stats['total'] += 1

                if not config.mute_pbar:
                    pbar.update(1)

    if not config.mute_pbar:
        pbar.close()

    return summary


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--param_path', type=str, default=None, help='JSON file overriding the defaults.')
    parser.add_argument('--rounds', '-r', type=int, nargs='?', help='Number of sweeps over the samples.')
    parser.add_argument('--mute_pbar', action='store_true', default=None)
    args = parser.parse_args()

    config = load_config(args.param_path, rounds=args.rounds, mute_pbar=args.mute_pbar)
    config.show()

    summary = run(config)

    table = [[kind, s['identity'], s['composition'], s['total']] for kind, s in summary.items()]
    print('\n=== Functor laws ===')
    print(tabulate(table, headers=['Kind', 'Identity', 'Composition', 'Total']))

    failed = [kind for kind, s in summary.items() if s['identity'] < s['total'] or s['composition'] < s['total']]
    if failed:
        raise RuntimeError(f'functor laws violated by: {", ".join(failed)}')


if __name__ == '__main__':
    import pretty_errors  # noqa
    main()
