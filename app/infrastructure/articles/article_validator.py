"""
Adapter: Article form validator.

Implements FormValidator port.
Rules are declared as pydantic models; pydantic's error list is
translated into per-field, human-readable messages.
"""

import logging
from typing import Annotated, Any, Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError,
    field_validator,
)

from app.domain.articles.entities import ValidationResult
from app.domain.articles.ports import FormInput, FormValidator
from app.infrastructure.articles.tables import TAG_MAX_LEN, TITLE_MAX_LEN

logger = logging.getLogger(__name__)

FormMode = Literal["create", "update"]

TagName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=TAG_MAX_LEN)]


class ArticleCreateForm(BaseModel):
    """Rules for a new article."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(min_length=1, max_length=TITLE_MAX_LEN)
    content: str = Field(min_length=1)
    tags: Optional[list[TagName]] = None

    @field_validator("tags", mode="before")
    @classmethod
    def split_comma_separated(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.split(",")
        return value


class ArticleUpdateForm(ArticleCreateForm):
    """Rules for changing an existing article."""

    id: int = Field(ge=1)


_FORMS: dict[str, type[ArticleCreateForm]] = {
    "create": ArticleCreateForm,
    "update": ArticleUpdateForm,
}


class ArticleFormValidator(FormValidator):
    """Validates article form input.

    Args:
        mode: "create" for new articles, "update" to also require an id.
    """

    def __init__(self, mode: FormMode = "create") -> None:
        if mode not in _FORMS:
            raise ValueError(f"Unknown form mode: {mode}")
        self._mode = mode
        self._form = _FORMS[mode]

    @property
    def mode(self) -> str:
        return self._mode

    def validate(self, data: FormInput) -> ValidationResult:
        """Check the input against the article rules.

        Args:
            data: Flat mapping of field name to submitted value.

        Returns:
            A passing result, or a failing one with messages per field.
        """
        try:
            self._form.model_validate(dict(data))
        except ValidationError as exc:
            errors = _collect_messages(exc)
            logger.debug(
                "Article %s form invalid on fields: %s", self._mode, sorted(errors)
            )
            return ValidationResult.failed(errors)
        return ValidationResult.ok()


def _collect_messages(exc: ValidationError) -> dict[str, list[str]]:
    """Group pydantic errors by top-level field, in reported order."""
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__all__"
        message = _message_for(field, error)
        messages = errors.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return errors


def _message_for(field: str, error: Any) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return f"{field} is required"
    if kind == "string_too_short" and ctx.get("min_length") == 1:
        return f"{field} is required"
    if kind in ("string_type", "int_type") and error.get("input") is None:
        return f"{field} is required"
    if kind == "string_too_long":
        return f"{field} may not be greater than {ctx['max_length']} characters"
    if kind in ("int_parsing", "int_type", "int_from_float"):
        return f"{field} must be an integer"
    if kind == "greater_than_equal":
        return f"{field} must be at least {ctx['ge']}"
    return f"{field}: {error['msg']}"
