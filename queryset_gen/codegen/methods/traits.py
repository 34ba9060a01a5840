"""
Capability traits for generated methods.

Each trait renders one slice of a method declaration: its name, receiver,
argument list, return values or doc comment. Recipes pick the traits they
need and hand them to a MethodBuilder.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..core.naming import title_words


class Naming(ABC):
    """Derives the final method name."""

    @abstractmethod
    def render(self) -> str:
        pass


@dataclass(frozen=True)
class PlainName(Naming):
    """Struct and model level methods: the name is the operation itself."""

    name: str

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class OnFieldName(Naming):
    """
    Field keyed methods: operation and field name concatenated.

    field_first=True gives NameEq, field_first=False gives PreloadBooks.
    """

    operation: str
    field_name: str
    field_first: bool = True

    def render(self) -> str:
        operation = title_words(self.operation)
        if self.field_first:
            return self.field_name + operation
        return operation + self.field_name


@dataclass(frozen=True)
class Receiver:
    """Explicit receiver declaration; empty means the query-set receiver."""

    declaration: str = ""

    def render(self) -> str:
        return self.declaration


class Args(ABC):
    """Renders the argument list of a method declaration."""

    @abstractmethod
    def render(self) -> str:
        pass


@dataclass(frozen=True)
class NoArgs(Args):
    def render(self) -> str:
        return ""


@dataclass(frozen=True)
class OneArg(Args):
    arg_name: str
    arg_type_name: str

    def render(self) -> str:
        return f"{self.arg_name} {self.arg_type_name}"


class Returns(ABC):
    """Renders the return values for a given query-set type."""

    @abstractmethod
    def render(self, qs_type_name: str) -> str:
        pass


@dataclass(frozen=True)
class QuerySetReturn(Returns):
    """Chainable methods return the query set itself."""

    def render(self, qs_type_name: str) -> str:
        return qs_type_name


@dataclass(frozen=True)
class ErrorReturn(Returns):
    def render(self, qs_type_name: str) -> str:
        return "error"


DEFAULT_DOC_TEMPLATE = "// {name} is an autogenerated method\n// nolint: dupl"


@dataclass(frozen=True)
class Doc:
    """Explicit documentation, or the autogenerated comment as fallback."""

    text: Optional[str] = None

    def render(self, method_name: str) -> str:
        if self.text:
            return self.text
        return DEFAULT_DOC_TEMPLATE.format(name=method_name)



@dataclass(frozen=True)
class TargetCall:
    """The GORM call a method delegates to: the logical name unless overridden."""

    logical_name: str
    override: Optional[str] = None

    def render(self) -> str:
        return self.override or self.logical_name
