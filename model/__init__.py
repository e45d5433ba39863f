from . import auth
from . import usage
from . import code
from . import stats
from . import health
from . import dashboard

from .auth import *
from .usage import *
from .code import *
from .stats import *
from .health import *
from .dashboard import *

__all__ = [
    *auth.__all__,
    *usage.__all__,
    *code.__all__,
    *stats.__all__,
    *health.__all__,
    *dashboard.__all__,
]
