"""Annotation fact table.

Facts are recorded once, while a class is being declared, and read back by
the resolvers. Classes are held weakly so throwaway declarations (tests,
dynamically built classes) do not accumulate.

Responsibilities:
- record declaration, property and constructor-parameter facts per class
- answer the three read operations without merging or validating

Absence is never an error here: a class without a declaration reads as
``None`` and a class without member facts reads as an empty tuple.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING
from weakref import WeakKeyDictionary

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ngmeta.domain.model import DirectiveAnnotation, ParameterAnnotation, PropertyAnnotation


log = getLogger(__name__)

type PropertyFact = tuple[str, PropertyAnnotation]


@dataclass(slots=True, kw_only=True)
class ClassFacts:
    declaration: DirectiveAnnotation | None = None
    properties: list[PropertyFact] = field(default_factory=list["PropertyFact"])
    parameters: tuple[ParameterAnnotation, ...] = ()


class AnnotationRegistry:
    """Side map from class identity to the annotation facts declared on it."""

    def __init__(self) -> None:
        self._facts: WeakKeyDictionary[type[object], ClassFacts] = WeakKeyDictionary()

    def __contains__(self, type_: object) -> bool:
        return isinstance(type_, type) and type_ in self._facts

    def _facts_for(self, type_: type[object]) -> ClassFacts:
        facts = self._facts.get(type_)
        if facts is None:
            facts = ClassFacts()
            self._facts[type_] = facts
        return facts

    # builder side -----------------------------------------------------------

    def declare(self, type_: type[object], declaration: DirectiveAnnotation) -> None:
        facts = self._facts_for(type_)
        if facts.declaration is not None:
            log.debug("Replacing %s declaration on %s", facts.declaration.kind, type_.__name__)
        facts.declaration = declaration

    def annotate_property(
        self,
        type_: type[object],
        name: str,
        annotation: PropertyAnnotation,
    ) -> None:
        self._facts_for(type_).properties.append((name, annotation))

    def annotate_parameters(
        self,
        type_: type[object],
        parameters: Iterable[ParameterAnnotation],
    ) -> None:
        self._facts_for(type_).parameters = tuple(parameters)

    def forget(self, type_: type[object]) -> None:
        self._facts.pop(type_, None)

    # reader side ------------------------------------------------------------

    def read_declaration(self, type_: type[object]) -> DirectiveAnnotation | None:
        facts = self._facts.get(type_)
        return facts.declaration if facts is not None else None

    def read_property_annotations(self, type_: type[object]) -> tuple[PropertyFact, ...]:
        facts = self._facts.get(type_)
        return tuple(facts.properties) if facts is not None else ()

    def read_parameter_annotations(self, type_: type[object]) -> tuple[ParameterAnnotation, ...]:
        facts = self._facts.get(type_)
        return facts.parameters if facts is not None else ()


default_registry = AnnotationRegistry()
