"""Unit tests for the point-free helpers."""

import pytest

from pyfunctor import Container, Maybe, Right, Left, IO, Func1, identity, compose, curry, fmap


def add(x, y):
    return x + y


class TestFunc1:
    def test_call(self):
        assert Func1(len)('abc') == 3

    def test_compose_right_to_left(self):
        f = Func1(lambda x: x + 1) @ (lambda x: x * 10)
        assert f(2) == 21
        assert Func1(str).compose(len)('abcd') == '4'

    def test_rmatmul(self):
        f = (lambda x: x + 1) @ Func1(lambda x: x * 10)
        assert isinstance(f, Func1)
        assert f(2) == 21

    def test_rejects_non_callable(self):
        with pytest.raises(AssertionError):
            Func1(42)


class TestCompose:
    def test_empty_is_identity(self):
        assert compose()(7) == 7

    def test_order(self):
        calls = []

        def tag(name):
            def f(x):
                calls.append(name)
                return x + [name]
            return f

        assert compose(tag('f'), tag('g'), tag('h'))([]) == ['h', 'g', 'f']
        assert calls == ['h', 'g', 'f']

    def test_identity(self):
        marker = object()
        assert identity(marker) is marker


class TestCurry:
    def test_partial_application(self):
        curried = curry(add)
        assert curried(1)(2) == 3
        assert curried(1, 2) == 3
        assert curried()(1)(2) == 3

    def test_keeps_metadata(self):
        assert curry(add).__name__ == 'add'

    def test_defaults_not_counted(self):
        def greet(name, greeting='hello'):
            return f'{greeting} {name}'

        assert curry(greet)('you') == 'hello you'

    def test_partials_are_independent(self):
        inc = curry(add)(1)
        dec = curry(add)(-1)
        assert inc(10) == 11
        assert dec(10) == 9
        assert inc(0) == 1


class TestFmap:
    @pytest.mark.parametrize('functor, expected', [
        (Container(2), Container(3)),
        (Maybe(2), Maybe(3)),
        (Maybe(None), Maybe(None)),
        (Right(2), Right(3)),
        (Left('err'), Left('err')),
    ])
    def test_works_over_any_kind(self, functor, expected):
        assert fmap(lambda x: x + 1)(functor) == expected
        assert fmap(lambda x: x + 1, functor) == expected

    def test_io(self):
        assert fmap(str.upper)(IO.of('abc')).unsafe_perform_io() == 'ABC'

    def test_point_free_pipeline(self):
        pipeline = compose(fmap(len), fmap(str.strip))
        assert pipeline(Container('  four  ')) == Container(4)
        assert pipeline(Maybe(None)) == Maybe(None)

    def test_rejects_plain_values(self):
        with pytest.raises(TypeError, match='Functor'):
            fmap(len, [1, 2, 3])
