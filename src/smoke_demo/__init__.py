"""smoke_demo — fixed console transcript exercising arithmetic, strings, a function and an object."""

__all__ = [
    "__version__",
    "run",
    "validate_instance",
    "Console",
    "DemoResult",
    "Person",
]
__version__ = "0.1.0"

from smoke_demo.api import run, validate_instance  # noqa: E402, F401
from smoke_demo.console import Console  # noqa: E402, F401
from smoke_demo.model.demo_result import DemoResult  # noqa: E402, F401
from smoke_demo.model.person import Person  # noqa: E402, F401
