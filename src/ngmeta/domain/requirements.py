"""Translate host-scoped constructor injections into directive lookup expressions.

Grammar of a lookup expression::

    lookup ::= ["?"] ["^"] name

``?`` marks the dependency optional and ``^`` starts the search at the parent
scope. ``self_only`` suppresses ``^``; every other host-scoped lookup (the
default and ``skip_self``) carries it.

Parameters without ``host`` are satisfied by a different injection channel
and never appear in the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ngmeta.domain.errors import ConflictingScopeQualifiersError, EmptyInjectionTokenError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ngmeta.domain.model import Inject, InjectionToken, ParameterAnnotation

type SelectorLookup = Callable[[type[object]], str]

OPTIONAL_PREFIX = "?"
PARENT_SCOPE_PREFIX = "^"


def directive_name_from_selector(selector: str) -> str:
    """Turn a selector into the name the host runtime registers the directive under.

    Attribute brackets are dropped and dash-separated words are camelCased, so
    ``[ng-model]`` becomes ``ngModel``.
    """

    name = selector.strip()
    if name.startswith("[") and name.endswith("]"):
        name = name[1:-1].strip()
    head, *rest = name.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def resolve_token_name(token: InjectionToken, *, selector_of: SelectorLookup) -> str:
    """Return the dependency name for a literal or class-reference token."""

    if isinstance(token, str):
        return token
    return directive_name_from_selector(selector_of(token))


def lookup_expression(name: str, inject: Inject) -> str:
    prefix = OPTIONAL_PREFIX if inject.optional else ""
    if not inject.self_only:
        prefix += PARENT_SCOPE_PREFIX
    return f"{prefix}{name}"


def requirement_for(parameter: ParameterAnnotation, *, selector_of: SelectorLookup) -> str:
    """Validate one host-scoped parameter and return its lookup expression."""

    inject = parameter.inject
    if inject is None or not inject.host:
        raise ValueError(f"Parameter {parameter.name!r} does not inject a directive")

    name = resolve_token_name(inject.token, selector_of=selector_of)
    if not name:
        raise EmptyInjectionTokenError(parameter.name)
    if inject.self_only and inject.skip_self:
        raise ConflictingScopeQualifiersError(parameter.name, name)
    return lookup_expression(name, inject)


def required_directives_map(
    parameters: Iterable[ParameterAnnotation],
    *,
    selector_of: SelectorLookup,
) -> dict[str, str]:
    """Map each host-scoped parameter's binding name to its lookup expression."""

    return {
        parameter.name: requirement_for(parameter, selector_of=selector_of)
        for parameter in parameters
        if parameter.injects_directive
    }
