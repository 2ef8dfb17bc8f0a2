"""Pydantic models describing class-level declaration payloads."""

from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ngmeta.domain.model.enums import DeclarationKind
from ngmeta.domain.model.queries import QueryDescriptor


def _reject_blank_bindings(value: tuple[str, ...]) -> tuple[str, ...]:
    for binding in value:
        if not binding.strip():
            raise ValueError("binding entries must not be blank")
    return value


class DeclarationModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class DirectiveAnnotation(DeclarationModel):
    """Selector and explicit metadata given to ``@directive``."""

    selector: str
    inputs: tuple[str, ...] = ()
    outputs: tuple[str, ...] = ()
    attrs: tuple[str, ...] = ()
    host: dict[str, str] = Field(default_factory=dict)
    export_as: str | None = Field(default=None, alias="exportAs")
    queries: dict[str, Any] = Field(default_factory=dict)
    providers: tuple[Any, ...] | None = None

    KIND: ClassVar[DeclarationKind] = DeclarationKind.DIRECTIVE

    _check_bindings = field_validator("inputs", "outputs", "attrs")(_reject_blank_bindings)

    @field_validator("queries")
    @classmethod
    def _require_query_descriptors(cls, value: dict[str, Any]) -> dict[str, Any]:
        for name, query in value.items():
            if not isinstance(query, QueryDescriptor):
                raise ValueError(f"query {name!r} is not a query descriptor")  # noqa: TRY004
        return value

    @property
    def kind(self) -> DeclarationKind:
        return self.KIND


class ComponentAnnotation(DirectiveAnnotation):
    """Directive payload plus the view and legacy settings of ``@component``."""

    template: str | None = None
    template_url: str | None = Field(default=None, alias="templateUrl")
    legacy: dict[str, Any] | None = None

    KIND: ClassVar[DeclarationKind] = DeclarationKind.COMPONENT

    @model_validator(mode="after")
    def _single_template_source(self) -> Self:
        if self.template is not None and self.template_url is not None:
            raise ValueError("component cannot declare both template and template_url")
        return self
