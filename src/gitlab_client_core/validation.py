"""Validate untyped JSON into typed records.

Coercion is pydantic's lax mode: ``"5"`` fills an ``int`` field and ``"true"``
fills a ``bool`` field, absent optional fields take their declared defaults and
``Literal`` fields reject values outside their set. Every failing field is
reported, not only the first one.
"""

from functools import lru_cache
from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, TypeAdapter

from gitlab_client_core.errors.exceptions import FieldError, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def field_errors(exc: pydantic.ValidationError) -> list[FieldError]:
    """Flatten pydantic's error list into ``FieldError`` entries with dotted paths."""
    return [
        FieldError(
            path=".".join(str(part) for part in error["loc"]),
            message=error["msg"],
            type=error["type"],
        )
        for error in exc.errors()
    ]


def validate_record(model: type[ModelT], data: Any, context: str | None = None) -> ModelT:
    """Validate one JSON object against ``model``.

    Raises:
        ValidationError: listing every failing field
    """
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise _validation_error(model, e, context) from e


@lru_cache(maxsize=None)
def _list_adapter(model: type[BaseModel]) -> TypeAdapter:
    return TypeAdapter(list[model])  # type: ignore[valid-type]


def validate_items(model: type[ModelT], items: Any, context: str | None = None) -> list[ModelT]:
    """Validate a JSON array of ``model`` records.

    Paths of failing fields start with the item index, e.g. ``2.author.id``.

    Raises:
        ValidationError: if ``items`` is not a list or any item fails
    """
    try:
        return _list_adapter(model).validate_python(items)
    except pydantic.ValidationError as e:
        raise _validation_error(model, e, context) from e


def _validation_error(
    model: type[BaseModel], exc: pydantic.ValidationError, context: str | None
) -> ValidationError:
    errors = field_errors(exc)
    subject = context or model.__name__
    noun = "field" if len(errors) == 1 else "fields"
    return ValidationError(
        f"Unexpected response for {subject}: {len(errors)} invalid {noun} ({'; '.join(map(str, errors))})",
        errors=errors,
    )
