"""
Method descriptors.

A MethodDescriptor is the uniform contract the emitter queries for every
generated method. It is assembled by a MethodBuilder from capability traits
and a body rule, and is immutable once built.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.generator import GeneratorError
from .bodies import BodyRule
from .traits import (
    Args,
    Doc,
    Naming,
    NoArgs,
    PlainName,
    QuerySetReturn,
    Receiver,
    Returns,
    TargetCall,
)


class MethodConstructionError(GeneratorError):
    """A method descriptor could not be built from the given metadata."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation


@dataclass(frozen=True)
class MethodDescriptor:
    """Everything the emitter needs to render one method."""

    name: str
    naming: Naming
    receiver: Receiver
    args: Args
    returns: Returns
    doc_trait: Doc
    target_call: TargetCall
    body_rule: BodyRule

    @property
    def method_name(self) -> str:
        return self.naming.render()

    @property
    def receiver_declaration(self) -> str:
        return self.receiver.render()

    @property
    def args_declaration(self) -> str:
        return self.args.render()

    def return_values_declaration(self, qs_type_name: str) -> str:
        return self.returns.render(qs_type_name)

    @property
    def body(self) -> str:
        return self.body_rule.render()

    @property
    def doc(self) -> str:
        return self.doc_trait.render(self.method_name)

    @property
    def gorm_call(self) -> str:
        return self.target_call.render()

    @property
    def is_chainable(self) -> bool:
        return isinstance(self.returns, QuerySetReturn)

    def signature(self, qs_type_name: str) -> str:
        """Name, arguments and return values, e.g. ``NameEq(name string) UserQuerySet``."""
        return (
            f"{self.method_name}({self.args_declaration}) "
            f"{self.return_values_declaration(qs_type_name)}"
        )


class MethodBuilder:
    """
    Collects a method's capabilities, then builds an immutable descriptor.

    Defaults: plain name, query-set receiver, no arguments, query-set return,
    autogenerated doc, GORM call named after the method. A name and a body
    rule are required.
    """

    def __init__(self, name: str):
        self._name = name
        self._naming: Optional[Naming] = None
        self._receiver = Receiver()
        self._args: Args = NoArgs()
        self._returns: Returns = QuerySetReturn()
        self._doc = Doc()
        self._target_call: Optional[TargetCall] = None
        self._body_rule: Optional[BodyRule] = None

    def naming(self, naming: Naming) -> "MethodBuilder":
        self._naming = naming
        return self

    def receiver(self, declaration: str) -> "MethodBuilder":
        self._receiver = Receiver(declaration)
        return self

    def args(self, args: Args) -> "MethodBuilder":
        self._args = args
        return self

    def returns(self, returns: Returns) -> "MethodBuilder":
        self._returns = returns
        return self

    def doc(self, text: Optional[str]) -> "MethodBuilder":
        self._doc = Doc(text)
        return self

    def target_call(self, target: TargetCall) -> "MethodBuilder":
        self._target_call = target
        return self

    def body(self, rule: BodyRule) -> "MethodBuilder":
        self._body_rule = rule
        return self

    def build(self) -> MethodDescriptor:
        if not self._name:
            raise MethodConstructionError("method name must not be empty")
        if self._body_rule is None:
            raise MethodConstructionError(
                f"method {self._name!r} has no body rule", operation=self._name
            )

        return MethodDescriptor(
            name=self._name,
            naming=self._naming or PlainName(self._name),
            receiver=self._receiver,
            args=self._args,
            returns=self._returns,
            doc_trait=self._doc,
            target_call=self._target_call or TargetCall(self._name),
            body_rule=self._body_rule,
        )
