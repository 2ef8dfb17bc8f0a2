from __future__ import annotations

import pytest
from pydantic import ValidationError

from ngmeta.domain.model import (
    ComponentAnnotation,
    ContentChild,
    DeclarationKind,
    DirectiveAnnotation,
)


def test_directive_annotation_defaults() -> None:
    declaration = DirectiveAnnotation(selector="[x]")

    assert declaration.kind is DeclarationKind.DIRECTIVE
    assert declaration.inputs == ()
    assert declaration.outputs == ()
    assert declaration.attrs == ()
    assert declaration.host == {}
    assert declaration.queries == {}
    assert declaration.export_as is None
    assert declaration.providers is None


def test_directive_annotation_accepts_camel_case_aliases() -> None:
    declaration = DirectiveAnnotation.model_validate({"selector": "[x]", "exportAs": "ctrl"})

    assert declaration.export_as == "ctrl"


def test_directive_annotation_converts_lists_to_tuples() -> None:
    declaration = DirectiveAnnotation.model_validate({"selector": "[x]", "inputs": ["a", "b: c"]})

    assert declaration.inputs == ("a", "b: c")


def test_directive_annotation_rejects_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        DirectiveAnnotation.model_validate({"selector": "[x]", "template": "<p></p>"})


def test_directive_annotation_rejects_blank_bindings() -> None:
    with pytest.raises(ValidationError, match="must not be blank"):
        DirectiveAnnotation.model_validate({"selector": "[x]", "outputs": ["ok", "  "]})


def test_directive_annotation_requires_query_descriptors() -> None:
    with pytest.raises(ValidationError):
        DirectiveAnnotation.model_validate({"selector": "[x]", "queries": {"pane": "pane"}})

    declaration = DirectiveAnnotation.model_validate(
        {"selector": "[x]", "queries": {"pane": ContentChild("pane")}}
    )
    assert declaration.queries == {"pane": ContentChild("pane")}


def test_component_annotation_accepts_template_url_alias() -> None:
    declaration = ComponentAnnotation.model_validate(
        {"selector": "card", "templateUrl": "card.html", "legacy": {"controllerAs": "card"}}
    )

    assert declaration.kind is DeclarationKind.COMPONENT
    assert declaration.template_url == "card.html"
    assert declaration.legacy == {"controllerAs": "card"}


def test_component_annotation_rejects_two_template_sources() -> None:
    with pytest.raises(ValidationError, match="both template and template_url"):
        ComponentAnnotation(selector="card", template="<p></p>", template_url="card.html")
