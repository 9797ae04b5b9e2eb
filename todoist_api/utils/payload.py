"""Pure helpers for moving values between the wire and domain shapes.

Field tables are plain ``{source_key: target_key}`` mappings.  None of the
helpers mutate their arguments.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..exceptions import ApiError, ValidationError


def require(value: Any, field: str, operation: str) -> None:
    """Raise :class:`ValidationError` if *value* is missing or empty."""
    if not value:
        raise ValidationError(f"{field} is required to {operation}")


def require_any(values: Mapping[str, Any], fields: Iterable[str], message: str) -> None:
    """Raise :class:`ValidationError` unless at least one of *fields* is set."""
    if not any(values.get(field) for field in fields):
        raise ValidationError(message)


def compact(
    values: Mapping[str, Any], field_map: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """Return the entries of *values* that are not ``None``.

    When *field_map* is given only its keys are considered and each one is
    renamed to the mapped key, in table order.
    """
    if field_map is None:
        return {key: value for key, value in values.items() if value is not None}
    return {
        target: values[source]
        for source, target in field_map.items()
        if values.get(source) is not None
    }


def rename_present(data: Mapping[str, Any], field_map: Mapping[str, str]) -> Dict[str, Any]:
    """Rename every key of *field_map* that is present in *data*.

    Keys present with a ``null`` value are kept; absent keys stay absent.
    """
    return {target: data[source] for source, target in field_map.items() if source in data}


def camel_case(name: str) -> str:
    """``is_recurring`` -> ``isRecurring``."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def wire_to_domain(*wire_names: str) -> Dict[str, str]:
    """Build a ``{snake_case: camelCase}`` table for decoding responses."""
    return {name: camel_case(name) for name in wire_names}


def domain_to_wire(*wire_names: str) -> Dict[str, str]:
    """Build a ``{camelCase: snake_case}`` table for encoding requests."""
    return {camel_case(name): name for name in wire_names}


def expect_object(data: Any) -> Dict[str, Any]:
    """Return *data* if the API answered with a JSON object, else raise :class:`ApiError`."""
    if not isinstance(data, dict):
        raise ApiError("Unexpected response", cause=data)
    return data


def results(data: Any, key: str = "results") -> List[Any]:
    """The item list of a paginated response (``{"results": [...], "next_cursor": ...}``)."""
    return expect_object(data).get(key) or []
