"""Property- and parameter-level annotation facts."""

from __future__ import annotations

from dataclasses import KW_ONLY, dataclass
from typing import ClassVar

from ngmeta.domain.model.enums import BindingKind
from ngmeta.domain.model.members import MemberAnnotation
from ngmeta.domain.model.queries import QueryDescriptor

type InjectionToken = str | type[object]

ALIAS_SEPARATOR = ": "


@dataclass(frozen=True, slots=True)
class BindingAnnotation(MemberAnnotation):
    """Declares a member as an input, output or attribute binding."""

    alias: str | None = None

    # class-level discriminator; subclasses must override
    KIND: ClassVar[BindingKind]

    @property
    def kind(self) -> BindingKind:
        return self.KIND

    def binding_for(self, property_name: str) -> str:
        if self.alias is None:
            return property_name
        return f"{property_name}{ALIAS_SEPARATOR}{self.alias}"


@dataclass(frozen=True, slots=True)
class Input(BindingAnnotation):
    KIND: ClassVar[BindingKind] = BindingKind.INPUTS


@dataclass(frozen=True, slots=True)
class Output(BindingAnnotation):
    KIND: ClassVar[BindingKind] = BindingKind.OUTPUTS


@dataclass(frozen=True, slots=True)
class Attr(BindingAnnotation):
    KIND: ClassVar[BindingKind] = BindingKind.ATTRS


@dataclass(frozen=True, slots=True)
class HostBinding(MemberAnnotation):
    """Binds a host element property (``class.disabled``) to the member."""

    expression: str

    @property
    def host_key(self) -> str:
        return f"[{self.expression}]"

    def handler_for(self, property_name: str) -> str:
        return property_name


@dataclass(frozen=True, slots=True)
class HostListener(MemberAnnotation):
    """Calls the member when the host element emits ``event``."""

    event: str
    args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.args, str):
            raise TypeError(f"HostListener args must be a sequence of strings, got {self.args!r}")
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def host_key(self) -> str:
        return f"({self.event})"

    def handler_for(self, property_name: str) -> str:
        return f"{property_name}({', '.join(self.args)})"


type HostAnnotation = HostBinding | HostListener
type PropertyAnnotation = BindingAnnotation | HostAnnotation | QueryDescriptor


@dataclass(frozen=True, slots=True)
class Inject:
    """Injection token plus the scope qualifiers of one constructor parameter.

    ``host`` marks the parameter as a directive lookup in the component tree;
    ``self_only`` restricts the lookup to the current element and
    ``skip_self`` starts it at the parent.
    """

    token: InjectionToken
    _: KW_ONLY
    host: bool = False
    self_only: bool = False
    skip_self: bool = False
    optional: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.token, str | type):
            raise TypeError(f"Inject token must be a name or a class, got {self.token!r}")


@dataclass(frozen=True, slots=True, kw_only=True)
class ParameterAnnotation:
    """Facts for one constructor parameter; ``inject`` is None when unannotated."""

    name: str
    inject: Inject | None = None

    @property
    def injects_directive(self) -> bool:
        return self.inject is not None and self.inject.host
