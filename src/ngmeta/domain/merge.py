"""Merge a declaration payload with member annotations into resolved metadata.

Two phases keep ordering deterministic:
1) seed every field from the explicit payload
2) append/merge member facts in class-body order

Binding sequences (inputs/outputs/attrs) are de-duplicated by property name
afterwards, the later entry winning and keeping its position among the
survivors. ``host`` and ``queries`` are plain last-write-wins mappings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ngmeta.domain.model import (
    ALIAS_SEPARATOR,
    BindingAnnotation,
    BindingKind,
    ComponentAnnotation,
    ComponentMetadata,
    DirectiveMetadata,
    HostBinding,
    HostListener,
    QueryDescriptor,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ngmeta.domain.model import DirectiveAnnotation, PropertyAnnotation


@dataclass(slots=True, kw_only=True)
class MetadataDraft:
    """Mutable accumulator used while a single resolution is in progress."""

    bindings: dict[BindingKind, list[str]] = field(default_factory=dict[BindingKind, list[str]])
    host: dict[str, str] = field(default_factory=dict[str, str])
    queries: dict[str, QueryDescriptor] = field(default_factory=dict[str, QueryDescriptor])

    @classmethod
    def seeded_from(cls, declaration: DirectiveAnnotation) -> MetadataDraft:
        return cls(
            bindings={
                BindingKind.INPUTS: list(declaration.inputs),
                BindingKind.OUTPUTS: list(declaration.outputs),
                BindingKind.ATTRS: list(declaration.attrs),
            },
            host=dict(declaration.host),
            queries=dict(declaration.queries),
        )

    def apply(self, property_name: str, annotation: PropertyAnnotation) -> None:
        match annotation:
            case BindingAnnotation():
                self.bindings[annotation.kind].append(annotation.binding_for(property_name))
            case HostBinding() | HostListener():
                self.host[annotation.host_key] = annotation.handler_for(property_name)
            case QueryDescriptor():
                self.queries[property_name] = annotation

    def binding_tuple(self, kind: BindingKind, *, dedupe: bool) -> tuple[str, ...]:
        bindings = self.bindings.get(kind, [])
        return dedupe_bindings(bindings) if dedupe else tuple(bindings)


def binding_property_name(binding: str) -> str:
    """Return the class-side property of ``"prop"`` or ``"prop: alias"``."""

    return binding.split(ALIAS_SEPARATOR.strip(), 1)[0].strip()


def dedupe_bindings(bindings: Iterable[str]) -> tuple[str, ...]:
    """Keep the last binding per property name, preserving survivor order."""

    seen: set[str] = set()
    kept: list[str] = []
    for binding in reversed(list(bindings)):
        name = binding_property_name(binding)
        if name in seen:
            continue
        seen.add(name)
        kept.append(binding)
    kept.reverse()
    return tuple(kept)


def merge_metadata(
    declaration: DirectiveAnnotation,
    properties: Iterable[tuple[str, PropertyAnnotation]],
    *,
    dedupe: bool = True,
) -> DirectiveMetadata:
    """Build the resolved record for ``declaration`` and its member facts."""

    draft = MetadataDraft.seeded_from(declaration)
    for property_name, annotation in properties:
        draft.apply(property_name, annotation)

    fields: dict[str, Any] = {
        "selector": declaration.selector,
        "inputs": draft.binding_tuple(BindingKind.INPUTS, dedupe=dedupe),
        "outputs": draft.binding_tuple(BindingKind.OUTPUTS, dedupe=dedupe),
        "attrs": draft.binding_tuple(BindingKind.ATTRS, dedupe=dedupe),
        "host": draft.host,
        "export_as": declaration.export_as,
        "queries": draft.queries,
        "providers": declaration.providers,
    }
    if isinstance(declaration, ComponentAnnotation):
        return ComponentMetadata(
            **fields,
            template=declaration.template,
            template_url=declaration.template_url,
            legacy=dict(declaration.legacy) if declaration.legacy is not None else None,
        )
    return DirectiveMetadata(**fields)
