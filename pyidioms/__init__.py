"""pyidioms: small, tested renditions of everyday Python idioms.

Scoped timing (context managers), a generic single-value container, and
validated balance holders (properties, class/static methods), plus JSON
serialization helpers.
"""

from .core.balance import BalanceHolder, BankAccount, create_holder, holder_class, register_holder
from .core.container import Container
from .core.errors import InvalidArgument, PyIdiomsError
from .telemetry.metrics import Timer, timed

__version__ = "0.1.0"

__all__ = [
    "BalanceHolder",
    "BankAccount",
    "Container",
    "InvalidArgument",
    "PyIdiomsError",
    "Timer",
    "create_holder",
    "holder_class",
    "register_holder",
    "timed",
]
