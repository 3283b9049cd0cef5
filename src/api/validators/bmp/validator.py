"""Validação de payloads BMP antes de qualquer chamada de rede."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from api.validators.bmp.models import ANY_PAYLOAD_MODELS, EnvelopeModel
from utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

ModelT = TypeVar("ModelT", bound=BaseModel)


def _violations(exc: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "loc": ".".join(str(part) for part in error["loc"]),
            "msg": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def validate_payload(model: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    """Valida `data` contra o schema da variante (ou argumentos de tool).

    Raises:
        ValidationError: Com a lista de violações por campo.
    """
    try:
        return model.model_validate(dict(data))
    except PydanticValidationError as exc:
        raise ValidationError(
            f"invalid {model.__name__}",
            violations=_violations(exc),
        ) from exc


def validate_any_payload(data: Mapping[str, Any]) -> EnvelopeModel:
    """Valida contra as variantes em ordem fixa; a primeira que casar vence.

    Raises:
        ValidationError: Se nenhuma variante aceitar o payload.
    """
    violations: list[dict[str, Any]] = []
    for model in ANY_PAYLOAD_MODELS:
        try:
            return model.model_validate(dict(data))
        except PydanticValidationError as exc:
            violations.extend(
                {"variant": model.__name__, **violation} for violation in _violations(exc)
            )
    raise ValidationError("payload does not match any message variant", violations=violations)


def dump_payload(payload: EnvelopeModel) -> dict[str, Any]:
    """Serializa payload validado com nomes de campo do fio."""
    return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
