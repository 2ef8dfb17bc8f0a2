from __future__ import annotations

import pytest

from ngmeta.domain.model import (
    AnnotatedMember,
    Attr,
    BindingKind,
    ContentChild,
    ContentChildren,
    HostBinding,
    HostListener,
    Inject,
    Input,
    Output,
    ParameterAnnotation,
    QueryKind,
    ViewChild,
    ViewChildren,
)


class Pane:
    pass


@pytest.mark.parametrize(
    ("annotation", "kind"),
    [(Input(), BindingKind.INPUTS), (Output(), BindingKind.OUTPUTS), (Attr(), BindingKind.ATTRS)],
)
def test_binding_annotation_kinds(annotation: Input | Output | Attr, kind: BindingKind) -> None:
    assert annotation.kind is kind


def test_binding_for_formats_alias() -> None:
    assert Input("X").binding_for("p") == "p: X"
    assert Output().binding_for("p") == "p"


def test_host_binding_key_and_handler() -> None:
    binding = HostBinding("class.disabled")

    assert binding.host_key == "[class.disabled]"
    assert binding.handler_for("is_disabled") == "is_disabled"


def test_host_listener_key_and_handler() -> None:
    listener = HostListener("mousemove", ["$event.target"])

    assert listener.args == ("$event.target",)
    assert listener.host_key == "(mousemove)"
    assert listener.handler_for("on_move") == "on_move($event.target)"
    assert HostListener("click").handler_for("on_click") == "on_click()"


def test_query_descriptors_compare_by_kind_and_target() -> None:
    assert ContentChild(Pane) == ContentChild(Pane)
    assert ContentChild(Pane) != ContentChildren(Pane)
    assert ContentChild(Pane) != ContentChild("pane")
    assert hash(ViewChildren("li")) == hash(ViewChildren("li"))


def test_query_descriptor_traits() -> None:
    assert ContentChild(Pane).kind is QueryKind.CONTENT_CHILD
    assert ContentChild(Pane).first_only
    assert not ContentChildren(Pane).first_only
    assert ViewChild(Pane).is_view_query
    assert not ContentChildren(Pane).is_view_query


def test_member_annotation_wraps_function_and_stacks_in_order() -> None:
    def on_key(self: object) -> None:
        del self

    wrapped = HostListener("keyup")(HostListener("keydown")(on_key))

    assert isinstance(wrapped, AnnotatedMember)
    assert wrapped.member is on_key
    assert wrapped.annotations == (HostListener("keyup"), HostListener("keydown"))


def test_annotated_member_behaves_like_method_until_unwrapped() -> None:
    class Counter:
        count = 0

        @HostListener("click")
        def on_click(self) -> int:
            self.count += 1
            return self.count

    counter = Counter()

    assert counter.on_click() == 1


def test_host_listener_rejects_bare_string_args() -> None:
    with pytest.raises(TypeError, match="sequence of strings"):
        HostListener("click", "$event")  # type: ignore[arg-type]


def test_inject_rejects_tokens_that_are_neither_names_nor_classes() -> None:
    with pytest.raises(TypeError, match="name or a class"):
        Inject(42)  # type: ignore[arg-type]


def test_inject_defaults_to_no_qualifiers() -> None:
    inject = Inject("$log")

    assert (inject.host, inject.self_only, inject.skip_self, inject.optional) == (
        False,
        False,
        False,
        False,
    )


def test_parameter_annotation_injects_directive_only_with_host() -> None:
    assert ParameterAnnotation(name="a", inject=Inject("a", host=True)).injects_directive
    assert not ParameterAnnotation(name="b", inject=Inject("b", self_only=True)).injects_directive
    assert not ParameterAnnotation(name="c").injects_directive
