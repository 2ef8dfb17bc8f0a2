"""Member-level annotation base and the wrapper used for decorated methods."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


class MemberAnnotation:
    """Annotation attached to exactly one class member.

    Instances are assigned as class attributes (``one = Input()``) or applied
    as method decorators (``@HostListener("click")``). Applying one to a
    function wraps it in an :class:`AnnotatedMember`; stacking keeps the
    annotations in top-to-bottom order.
    """

    __slots__ = ()

    def __call__(self, member: Callable[..., Any] | AnnotatedMember) -> AnnotatedMember:
        if isinstance(member, AnnotatedMember):
            return AnnotatedMember(member=member.member, annotations=(self, *member.annotations))
        return AnnotatedMember(member=member, annotations=(self,))


@dataclass(frozen=True, slots=True, kw_only=True)
class AnnotatedMember:
    """A class member carrying annotations until its class is declared."""

    member: Any
    annotations: tuple[MemberAnnotation, ...]

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        # behave like the wrapped member if the class is never declared
        return self.member.__get__(instance, owner)
