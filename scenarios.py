import argparse
from typing import *

from tabulate import tabulate

from pyfunctor import Container, Maybe, IO, head, prop, safe_head, safe_prop
from pyfunctor.examples import account, address, exercises

_SCENARIO_DICT = dict()


def run_nested_io(io):
    # one perform per IO layer
    while isinstance(io, IO):
        io = io.unsafe_perform_io()
    return io


def register(func):
    _SCENARIO_DICT[func.__name__] = func
    return func


def get_scenario(name: str) -> Callable[[], List[Tuple[str, Any]]]:
    if name not in _SCENARIO_DICT:
        raise RuntimeError(f'unsupported scenario: {name}')
    return _SCENARIO_DICT[name]


@register
def containers():
    return [
        ('Container.of(3).map(x => x + 2)', Container.of(3).map(lambda x: x + 2)),
        ("Container.of('flamethrowers').map(upper)", Container.of('flamethrowers').map(str.upper)),
        ("Container.of('bombs').map(concat(' away')).map(len)",
         Container.of('bombs').map(lambda s: s + ' away').map(len)),
        ('Container.of(Container.of(3))', Container.of(Container.of(3))),
    ]


@register
def empty_head():
    absent = safe_head([])
    return [
        ('safe_head([])', absent),
        ('safe_head([]).map(head)', absent.map(head)),
    ]


@register
def street():
    addresses = [{'street': 'Shady Ln.', 'number': 4201}]
    return [
        ('street([])', address.street([])),
        ("street([{street: 'Shady Ln.', number: 4201}])", address.street(addresses)),
    ]


@register
def withdraw():
    return [
        ('withdraw(20, {balance: 200})', account.withdraw(20, {'balance': 200})),
        ('withdraw(20, {balance: 10})', account.withdraw(20, {'balance': 10})),
        ('get_twenty({balance: 200})', account.get_twenty({'balance': 200})),
        ('get_twenty({balance: 10})', account.get_twenty({'balance': 10})),
    ]


@register
def missing_prop():
    boris = {'name': 'Boris'}
    dinah = {'name': 'Dinah', 'age': 14}
    return [
        ("Maybe.of({name: 'Boris'}).map(prop('age')).map(add(10))",
         Maybe.of(boris).map(prop('age')).map(lambda x: x + 10)),
        ("Maybe.of({name: 'Dinah', age: 14}).map(prop('age')).map(add(10))",
         Maybe.of(dinah).map(prop('age')).map(lambda x: x + 10)),
        ("safe_prop('age', {name: 'Boris'})", safe_prop('age', boris)),
    ]


@register
def exercise_answers():
    ex4 = exercises.make_ex4(exercises.make_mailing_list())
    subscribed = ex4('sleepy@grandpa.net')
    return [
        ('ex1(user)', exercises.ex1(exercises.user)),
        ("ex1({name: 'nobody'})", exercises.ex1({'name': 'nobody'})),
        ("ex4('notanemail')", ex4('notanemail')),
        ("ex4('sleepy@grandpa.net')", subscribed),
        ("ex4('sleepy@grandpa.net'), performed", subscribed.map(run_nested_io)),
    ]


def run(names: Optional[List[str]] = None) -> List[List[str]]:
    names = names if names else list(_SCENARIO_DICT.keys())
    table = []
    for name in names:
        for expr, result in get_scenario(name)():
            table.append([name, expr, repr(result)])
    return table


if __name__ == '__main__':
    import pretty_errors  # noqa
    parser = argparse.ArgumentParser()
    parser.add_argument('--name', '-n', type=str, nargs='*', help='Names of the scenarios to run.')
    args = parser.parse_args()

    print(tabulate(run(args.name), headers=['Scenario', 'Expression', 'Result']))
