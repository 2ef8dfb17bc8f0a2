"""Resolved metadata records handed to the rendering layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ngmeta.domain.model.queries import QueryDescriptor


@dataclass(frozen=True, kw_only=True)
class DirectiveMetadata:
    """Fully merged metadata of a directive.

    Binding sequences keep explicit entries ahead of member contributions;
    ``host`` and ``queries`` hold every key from both sources.
    """

    selector: str
    inputs: tuple[str, ...] = ()
    outputs: tuple[str, ...] = ()
    attrs: tuple[str, ...] = ()
    host: dict[str, str] = field(default_factory=dict[str, str])
    export_as: str | None = None
    queries: dict[str, QueryDescriptor] = field(default_factory=dict[str, "QueryDescriptor"])
    providers: tuple[Any, ...] | None = None

    @property
    def is_component(self) -> bool:
        return False


@dataclass(frozen=True, kw_only=True)
class ComponentMetadata(DirectiveMetadata):
    template: str | None = None
    template_url: str | None = None
    legacy: dict[str, Any] | None = None

    @property
    def is_component(self) -> bool:
        return True
