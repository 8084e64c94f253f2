from . import account, address, exercises

__all__ = [
    'account',
    'address',
    'exercises'
]
