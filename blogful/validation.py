"""Presence checks shared by the POST and PATCH handlers."""
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from blogful.errors import ApiError, validation_message

ModelT = TypeVar("ModelT", bound=BaseModel)


def _quoted(fields) -> list[str]:
    return [f"'{field}'" for field in fields]


def is_present(value) -> bool:
    # An empty string carries nothing to write, same as a missing key.
    return value is not None and value != ""


async def parse_body(request: Request, model: type[ModelT]) -> ModelT:
    """
    Read the JSON request body into *model*.

    Called from inside a handler, after its path lookups have run, so a
    request for a missing resource answers 404 whatever its body holds.
    An empty body yields a model with every field unset.
    """
    raw = await request.body()
    if not raw.strip():
        return model()
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise ApiError(400, validation_message(exc.errors()))


def require_fields(data: BaseModel, fields) -> None:
    """
    Raise a 400 naming the first of *fields* (checked in order) that is
    missing or null in *data*.
    """
    for field in fields:
        if getattr(data, field) is None:
            raise ApiError(400, f"Missing '{field}' in request body")


def require_any(data: BaseModel, fields) -> None:
    """
    Raise a 400 listing *fields* unless at least one of them is present.

    The message joins the names as ``'a', 'b' or 'c'``.
    """
    if any(is_present(getattr(data, field)) for field in fields):
        return
    names = _quoted(fields)
    if len(names) > 1:
        listed = f"{', '.join(names[:-1])} or {names[-1]}"
    else:
        listed = names[0]
    raise ApiError(400, f"Request body must contain either {listed}")


def require_choice(value: str | None, field: str, choices) -> None:
    """Raise a 400 when a supplied *value* is not one of *choices*."""
    if value is not None and value not in choices:
        raise ApiError(400, f"'{field}' must be one of {', '.join(_quoted(choices))}")


def present_fields(data: BaseModel, fields) -> dict:
    """Return the values of *fields* in *data* that are present."""
    return {
        field: getattr(data, field)
        for field in fields
        if is_present(getattr(data, field))
    }
