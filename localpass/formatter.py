"""
Pass rendering.

format_pass is the public contract: a seven-line pass or the
INVALID_PASS sentinel, never an exception. render_pass returns the
structured outcome for callers that need to know why input was rejected.
"""

import logging
from dataclasses import dataclass
from typing import Any, Union

from .normalize import ascii_upper, compute_pass_id, title_case
from .schema import Invalid, Passenger, Valid, check_passenger

logger = logging.getLogger(__name__)

INVALID_PASS = "INVALID PASS"
PASS_HEADER = "MUMBAI LOCAL PASS"
PASS_RULE = "---"


@dataclass(frozen=True)
class RenderedPass:
    text: str
    pass_id: str
    passenger: Passenger
    ok = True


RenderResult = Union[RenderedPass, Invalid]


def build_pass_text(passenger: Passenger, pass_id: str) -> str:
    lines = [
        PASS_HEADER,
        PASS_RULE,
        f"Name: {ascii_upper(passenger.name)}",
        f"From: {title_case(passenger.origin)}",
        f"To: {title_case(passenger.destination)}",
        f"Class: {ascii_upper(passenger.class_type)}",
        f"Pass ID: {pass_id}",
    ]
    return "\n".join(lines)


def render_pass(data: Any) -> RenderResult:
    """
    Validate and render a passenger record.

    Returns:
        RenderedPass on success, otherwise the Invalid result from validation
    """
    result = check_passenger(data)
    if not isinstance(result, Valid):
        logger.debug("Rejected passenger record: %s (field=%s)", result.reason, result.field)
        return result

    passenger = result.passenger
    pass_id = compute_pass_id(passenger.class_type, passenger.origin, passenger.destination)
    return RenderedPass(
        text=build_pass_text(passenger, pass_id),
        pass_id=pass_id,
        passenger=passenger,
    )


def format_pass(data: Any) -> str:
    """Render a passenger record, or return "INVALID PASS"."""
    result = render_pass(data)
    if isinstance(result, RenderedPass):
        return result.text
    return INVALID_PASS
