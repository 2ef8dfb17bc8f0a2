"""Query descriptors.

A query descriptor is both the value stored under ``queries`` in resolved
metadata and the member annotation that produces it, so
``ContentChild(Pane)`` written in an explicit payload compares equal to the
one contributed by ``pane = ContentChild(Pane)`` in a class body.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ngmeta.domain.model.enums import QueryKind
from ngmeta.domain.model.members import MemberAnnotation

type QueryTarget = str | type[object]


@dataclass(frozen=True, slots=True)
class QueryDescriptor(MemberAnnotation):
    target: QueryTarget

    # class-level discriminator; subclasses must override
    KIND: ClassVar[QueryKind]

    @property
    def kind(self) -> QueryKind:
        return self.KIND

    @property
    def is_view_query(self) -> bool:
        return self.KIND in (QueryKind.VIEW_CHILD, QueryKind.VIEW_CHILDREN)

    @property
    def first_only(self) -> bool:
        return self.KIND in (QueryKind.CONTENT_CHILD, QueryKind.VIEW_CHILD)


@dataclass(frozen=True, slots=True)
class ContentChild(QueryDescriptor):
    KIND: ClassVar[QueryKind] = QueryKind.CONTENT_CHILD


@dataclass(frozen=True, slots=True)
class ContentChildren(QueryDescriptor):
    KIND: ClassVar[QueryKind] = QueryKind.CONTENT_CHILDREN


@dataclass(frozen=True, slots=True)
class ViewChild(QueryDescriptor):
    KIND: ClassVar[QueryKind] = QueryKind.VIEW_CHILD


@dataclass(frozen=True, slots=True)
class ViewChildren(QueryDescriptor):
    KIND: ClassVar[QueryKind] = QueryKind.VIEW_CHILDREN
