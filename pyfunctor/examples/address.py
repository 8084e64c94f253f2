from typing import *

from ..accessors import prop, safe_head
from ..functions import compose, fmap
from ..functors import Maybe

street: Callable[[Sequence], Maybe] = compose(fmap(prop('street')), safe_head)
