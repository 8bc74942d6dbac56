"""Field-level error grouping shared by request parsing and the validation pipeline."""

from collections import defaultdict
from collections.abc import Iterable
from typing import Any, Callable


def group_field_errors(
    errors: Iterable[dict[str, Any]],
    rename: Callable[[str], str] = lambda name: name,
) -> dict[str, list[str]]:
    """Group pydantic-style error dicts by the field they refer to.

    The field is the last string component of each error's `loc`;
    errors without one are reported under "request".
    """
    grouped: dict[str, list[str]] = defaultdict(list)
    for error in errors:
        names = [part for part in error.get("loc", ()) if isinstance(part, str)]
        field = rename(names[-1]) if names else "request"
        grouped[field].append(error["msg"])
    return dict(grouped)
