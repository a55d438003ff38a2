"""Mumbai local train pass formatter."""

__version__ = "0.1.0"

from .schema import check_passenger, validate_passenger, Passenger, Valid, Invalid
from .formatter import INVALID_PASS, RenderedPass, format_pass, render_pass

__all__ = [
    "__version__",
    "INVALID_PASS",
    "Invalid",
    "Passenger",
    "RenderedPass",
    "Valid",
    "check_passenger",
    "format_pass",
    "render_pass",
    "validate_passenger",
]
