from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from .normalize import ascii_lower

# Record key -> Passenger attribute ("from" is a keyword)
REQUIRED_STR_FIELDS = {
    "name": "name",
    "from": "origin",
    "to": "destination",
    "classType": "class_type",
}
CLASS_TYPES = ("first", "second")

NOT_A_RECORD = "not_a_record"
MISSING_FIELD = "missing_field"
NOT_TEXT = "not_text"
BLANK_FIELD = "blank_field"
UNKNOWN_CLASS = "unknown_class"


@dataclass(frozen=True)
class Passenger:
    """Trimmed, validated passenger record. class_type is lower-cased."""

    name: str
    origin: str
    destination: str
    class_type: str


@dataclass(frozen=True)
class Valid:
    passenger: Passenger
    ok = True


@dataclass(frozen=True)
class Invalid:
    reason: str
    field: Optional[str] = None
    message: str = ""
    ok = False


CheckResult = Union[Valid, Invalid]


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def _field_problem(data: Mapping, key: str) -> Optional[Invalid]:
    if key not in data:
        return Invalid(MISSING_FIELD, key, f"Missing required field: {key}")
    value = data[key]
    if not isinstance(value, str):
        return Invalid(NOT_TEXT, key, f"Field '{key}' must be a string")
    if not _is_non_empty_str(value):
        return Invalid(BLANK_FIELD, key, f"Field '{key}' must be a non-empty string")
    return None


def _class_problem(value: str) -> Optional[Invalid]:
    if ascii_lower(value.strip()) not in CLASS_TYPES:
        return Invalid(
            UNKNOWN_CLASS,
            "classType",
            f"Field 'classType' must be one of {', '.join(CLASS_TYPES)} (got {value.strip()!r})",
        )
    return None


def check_passenger(data: Any) -> CheckResult:
    """
    Validate an untrusted passenger record.

    Stops at the first problem, checking fields in the order name, from,
    to, classType. Never raises.

    Returns:
        Valid(passenger) with trimmed fields, or Invalid(reason, field, message)
    """
    if not isinstance(data, Mapping):
        return Invalid(NOT_A_RECORD, None, "Passenger must be a record (mapping)")

    for key in REQUIRED_STR_FIELDS:
        problem = _field_problem(data, key)
        if problem is not None:
            return problem

    problem = _class_problem(data["classType"])
    if problem is not None:
        return problem

    values = {attr: data[key].strip() for key, attr in REQUIRED_STR_FIELDS.items()}
    values["class_type"] = ascii_lower(values["class_type"])
    return Valid(Passenger(**values))


def validate_passenger(data: Any) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Unlike check_passenger, every field is checked.
    """
    if not isinstance(data, Mapping):
        return ["Passenger must be a record (mapping)"]

    errors: List[str] = []
    for key in REQUIRED_STR_FIELDS:
        problem = _field_problem(data, key)
        if problem is not None:
            errors.append(problem.message)

    # Class membership only makes sense once classType is usable text
    if _is_non_empty_str(data.get("classType")):
        problem = _class_problem(data["classType"])
        if problem is not None:
            errors.append(problem.message)

    return errors
