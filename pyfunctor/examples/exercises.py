"""The exercise set, solved with ``map`` alone.

Without ``chain`` the effectful exercises leave one wrapper per effect,
e.g. ``ex2()`` is an ``IO`` of an ``IO``.
"""
import os.path as osp
import re

from ..accessors import prop, safe_prop
from ..functions import compose, fmap
from ..functors import IO, Left, Right

user = {
    'id': 2,
    'name': 'albert',
    'address': {
        'street': {
            'number': 22,
            'name': 'Walnut St'
        }
    }
}

# Exercise 1: the street name of a user, if there is one.
ex1 = compose(fmap(prop('name')), fmap(prop('street')), safe_prop('address'))


# Exercise 2: the file name without its directory, logged purely.
def get_file() -> IO:
    return IO(lambda: __file__)


def pure_log(x) -> IO:
    def log():
        print(x)
        return f'logged {x}'

    return IO(log)


def ex2() -> IO:
    return get_file().map(osp.basename).map(pure_log)


# Exercise 4: validate an email, then subscribe it and announce the list.
_EMAIL_PATTERN = re.compile(r'\S+@\S+\.\S+')


def make_mailing_list():
    emails = []

    def add_to_mailing_list(email: str) -> IO:
        def add():
            emails.append(email)
            return emails

        return IO(add)

    return add_to_mailing_list


add_to_mailing_list = make_mailing_list()


def email_blast(emails) -> IO:
    return IO(lambda: 'emailed: ' + ','.join(emails))


def validate_email(x: str):
    if _EMAIL_PATTERN.search(x):
        return Right(x)
    return Left('invalid email')


def make_ex4(subscribe=add_to_mailing_list):
    return compose(fmap(fmap(email_blast)), fmap(subscribe), validate_email)


ex4 = make_ex4()
