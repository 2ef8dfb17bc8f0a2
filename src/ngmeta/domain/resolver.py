"""Directive resolver facade.

``resolve`` and ``get_required_directives_map`` are independent pipelines
that share one annotation fact table. Nothing is cached: every call reads the
facts again and returns fresh records.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from ngmeta.config import get_resolver_config
from ngmeta.domain.errors import MissingDirectiveAnnotationError
from ngmeta.domain.merge import merge_metadata
from ngmeta.domain.registry import default_registry
from ngmeta.domain.requirements import required_directives_map

if TYPE_CHECKING:
    from ngmeta.config import ResolverConfig
    from ngmeta.domain.model import DirectiveAnnotation, DirectiveMetadata
    from ngmeta.domain.registry import AnnotationRegistry


log = getLogger(__name__)


class DirectiveResolver:
    def __init__(
        self,
        registry: AnnotationRegistry | None = None,
        *,
        config: ResolverConfig | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry
        self._config = config if config is not None else get_resolver_config()

    def _declaration_of(self, type_: type[object]) -> DirectiveAnnotation:
        declaration = self._registry.read_declaration(type_)
        if declaration is None:
            raise MissingDirectiveAnnotationError(type_)
        return declaration

    def resolve(self, type_: type[object]) -> DirectiveMetadata:
        """Return the merged directive or component metadata of ``type_``.

        Raises ``MissingDirectiveAnnotationError`` if ``type_`` was never
        declared with ``@directive`` or ``@component``.
        """

        declaration = self._declaration_of(type_)
        properties = self._registry.read_property_annotations(type_)
        log.debug(
            "Resolving %s %s: selector=%r, member_facts=%s",
            declaration.kind,
            type_.__name__,
            declaration.selector,
            len(properties),
        )
        return merge_metadata(declaration, properties, dedupe=self._config.dedupe_bindings)

    def selector_of(self, type_: type[object]) -> str:
        return self.resolve(type_).selector

    def get_required_directives_map(self, type_: type[object]) -> dict[str, str]:
        """Return ``{parameter name: lookup expression}`` for host-scoped injections."""

        parameters = self._registry.read_parameter_annotations(type_)
        requirements = required_directives_map(parameters, selector_of=self.selector_of)
        log.debug("Required directives for %s: %s", type_.__name__, requirements)
        return requirements
