from . import engine
from . import user
from . import submission
from . import auth

from .engine import *
from .user import *
from .submission import *
from .auth import *

__all__ = [
    *engine.__all__,
    *user.__all__,
    *submission.__all__,
    *auth.__all__,
]
