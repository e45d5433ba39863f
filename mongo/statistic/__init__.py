from . import submission

from .submission import *

__all__ = [*submission.__all__]
