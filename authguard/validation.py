import json
import logging
from typing import Any, ClassVar

from fastapi import HTTPException, Request, status
from pydantic import BaseModel, ValidationError

logger = logging.getLogger("authguard.validation")


class FieldViolation(BaseModel):
    field: str
    rule: str
    message: str


class ValidationResult(BaseModel):
    value: Any = None
    violations: list[FieldViolation] = []

    @property
    def ok(self) -> bool:
        return not self.violations


class RequestSchema(BaseModel):
    """
    Base for request bodies validated with check_payload.
    Subclasses map violation rules to human-readable messages.
    """
    violation_messages: ClassVar[dict[str, str]] = {}


def _rule_for(error: dict) -> str:
    kind = error["type"]
    if kind == "missing":
        return "required"
    if kind == "string_too_short":
        value = error.get("input")
        if isinstance(value, str) and not value.strip():
            return "string_empty"
        return "length"
    if kind == "string_too_long":
        return "length"
    if kind == "string_pattern_mismatch":
        return "pattern"
    if kind in ("model_type", "model_attributes_type", "dict_type"):
        return "object_type"
    return kind


def check_payload(schema: type[BaseModel], payload: Any) -> ValidationResult:
    """
    Validate `payload` against `schema` without raising.
    Each failing field yields one FieldViolation(field, rule, message).
    """
    try:
        return ValidationResult(value=schema.model_validate(payload))
    except ValidationError as exc:
        messages = getattr(schema, "violation_messages", {})
        violations = []
        for error in exc.errors():
            rule = _rule_for(error)
            if rule == "object_type":
                message = "Request body must be a JSON object"
            else:
                message = messages.get(rule, error["msg"])
            violations.append(
                FieldViolation(
                    field=".".join(str(part) for part in error["loc"]),
                    rule=rule,
                    message=message,
                )
            )
        return ValidationResult(violations=violations)


def validated_body(schema: type[BaseModel]):
    """
    FastAPI dependency factory: parse the JSON body and validate it against `schema`.
    Answers 400 with every violation found; returns the parsed model otherwise.
    """

    async def dependency(request: Request):
        raw = await request.body()
        try:
            payload = json.loads(raw) if raw.strip() else {}
        except (ValueError, RecursionError):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": "Request body must be valid JSON.", "errors": []},
            )

        result = check_payload(schema, payload)
        if not result.ok:
            errors = [v.model_dump() for v in result.violations]
            logger.warning(
                "Request body validation failed: %s path=%s",
                errors,
                request.url.path,
            )
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": "Validation failed.", "errors": errors},
            )

        return result.value

    return dependency


def body_openapi(schema: type[BaseModel]) -> dict:
    """
    `openapi_extra` documenting a JSON body read through validated_body,
    which FastAPI cannot see on its own.
    """
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": schema.model_json_schema(by_alias=True)},
            },
        }
    }
