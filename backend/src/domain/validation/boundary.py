"""Explicit validator composition for request objects.

Each request type owns an ordered list of validator callables. A validator
takes the request and raises an ``OrderAppError`` on failure; the runner
stops at the first failure.
"""

from typing import Any, Callable, Iterable


BoundaryValidator = Callable[[Any], None]


def run_validators(obj: Any, validators: Iterable[BoundaryValidator]) -> None:
    """Run validators in order, propagating the first failure unchanged."""
    for validator in validators:
        validator(obj)
