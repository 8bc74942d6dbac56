"""
Mediated request pipeline.

Every request object (command or query) is sent through a Mediator,
which finds the use case registered for the request's type. If a
validator is registered as well, it runs first: all rules are checked
and every failing field is reported, and the use case is not invoked
when anything fails.

Validators are Pydantic models describing the request's rules. The
pipeline converts a pydantic ValidationError into a field -> messages
mapping carried by a validation Error.
"""

import dataclasses
import logging
from typing import Any, Callable, Optional, Protocol

from pydantic import BaseModel, ValidationError
from pydantic.alias_generators import to_camel

from storefront.shared.errors.fields import group_field_errors
from storefront.shared.result import Error, Result

logger = logging.getLogger(__name__)


class UseCase(Protocol):
    """Anything with an async execute(request) -> Result."""

    async def execute(self, request: Any) -> Result:
        ...


class RequestValidator:
    """Checks a request dataclass against a Pydantic rule model.

    Field names in the reported failures use the camelCase form
    the HTTP API exposes (page_size -> pageSize).
    """

    def __init__(self, rules: type[BaseModel]) -> None:
        self._rules = rules

    def validate(self, request: Any) -> dict[str, list[str]]:
        """Return field -> messages for every failed rule. Empty when valid."""
        try:
            self._rules.model_validate(dataclasses.asdict(request))
        except ValidationError as exc:
            return group_field_errors(exc.errors(), rename=to_camel)
        return {}


@dataclasses.dataclass(frozen=True)
class Registration:
    """How to build the use case for one request type, and how to validate it."""

    factory: Callable[["Mediator"], UseCase]
    validator: Optional[RequestValidator] = None


class Mediator:
    """Dispatches requests to their use cases through the validation pipeline.

    Use case factories receive the mediator itself so a use case can
    send further requests (AddItemToCart resolves its product this way).
    """

    def __init__(self) -> None:
        self._registrations: dict[type, Registration] = {}

    def register(
        self,
        request_type: type,
        factory: Callable[["Mediator"], UseCase],
        validator: Optional[RequestValidator] = None,
    ) -> None:
        """Register the use case (and optional validator) for a request type."""
        self._registrations[request_type] = Registration(factory, validator)

    async def send(self, request: Any) -> Result:
        """Validate the request, then run its use case.

        Returns:
            The use case's Result, or a validation Error if any rule failed.

        Raises:
            LookupError: If nothing is registered for the request type.
        """
        registration = self._registrations.get(type(request))
        if registration is None:
            raise LookupError(
                f"No use case registered for {type(request).__name__}"
            )

        if registration.validator is not None:
            failures = registration.validator.validate(request)
            if failures:
                logger.debug(
                    "%s rejected by validation: fields=%s",
                    type(request).__name__,
                    sorted(failures),
                )
                return Error.validation(failures)

        use_case = registration.factory(self)
        return await use_case.execute(request)
