from ..functions import compose, curry, fmap
from ..functors import Maybe


@curry
def withdraw(amount, account: dict) -> Maybe:
    if account['balance'] >= amount:
        return Maybe.of(dict(account, balance=account['balance'] - amount))
    return Maybe.nothing()


def update_ledger(account: dict) -> dict:
    # stand-in for a ledger write
    return account


def remaining_balance(account: dict) -> str:
    return f"Your balance is ${account['balance']}"


finish_transaction = compose(remaining_balance, update_ledger)


def get_twenty(account: dict) -> Maybe:
    return fmap(finish_transaction, withdraw(20, account))
