"""
Body templates for generated methods.

Chainable methods wrap their GORM call in the scope pattern: the call is
appended to the query set's db handle as a scope and the receiver is returned,
so filters compose left to right.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..core.templates import TemplateEngine, create_template_engine

SCOPE_TEMPLATE = """\
qs.db = qs.db.Scopes(func(d *gorm.DB) *gorm.DB {
	{{ code }}
})
return qs"""

CALL_TEMPLATE = "return d.{{ call }}({{ call_args }})"

WHERE_TEMPLATE = """\
return d.Where("{{ column }} {{ condition }}"
{%- if arg_name %}, {{ arg_name }}{% endif %})"""

MODEL_CALL_TEMPLATE = "return qs.db.{{ call }}({{ arg_name }}).Error"

CREATE_TEMPLATE = """\
if err := db.Create(o).Error; err != nil {
	return fmt.Errorf("can't create {{ struct_name }} %v: %s", o, err)
}
return nil"""

_BODY_TEMPLATES = {
    "scope": SCOPE_TEMPLATE,
    "call": CALL_TEMPLATE,
    "where": WHERE_TEMPLATE,
    "model_call": MODEL_CALL_TEMPLATE,
    "create": CREATE_TEMPLATE,
}


def _engine() -> TemplateEngine:
    engine = create_template_engine()
    if not engine.template_exists("scope"):
        for name, content in _BODY_TEMPLATES.items():
            engine.add_template(name, content)
    return engine


def wrap_in_scope(code: str) -> str:
    """Wrap a single GORM call statement in the scope pattern."""
    return _engine().render_template("scope", {"code": code})


class BodyRule(ABC):
    """Produces the body text of one generated method."""

    @abstractmethod
    def render(self) -> str:
        pass


@dataclass(frozen=True)
class ScopedCallBody(BodyRule):
    """d.<call>(<call_args>) inside a scope."""

    call: str
    call_args: str

    def render(self) -> str:
        code = _engine().render_template(
            "call", {"call": self.call, "call_args": self.call_args}
        )
        return wrap_in_scope(code)


@dataclass(frozen=True)
class WhereBody(BodyRule):
    """
    A WHERE fragment inside a scope.

    column is already in database form. When arg_name is set the fragment is
    parameterized and bound to that argument.
    """

    column: str
    condition: str
    arg_name: Optional[str] = None

    def render(self) -> str:
        code = _engine().render_template(
            "where",
            {
                "column": self.column,
                "condition": self.condition,
                "arg_name": self.arg_name,
            },
        )
        return wrap_in_scope(code)


@dataclass(frozen=True)
class ModelCallBody(BodyRule):
    """Runs the query and returns its error; not chainable."""

    call: str
    arg_name: str

    def render(self) -> str:
        return _engine().render_template(
            "model_call", {"call": self.call, "arg_name": self.arg_name}
        )


@dataclass(frozen=True)
class CreateBody(BodyRule):
    struct_name: str

    def render(self) -> str:
        return _engine().render_template("create", {"struct_name": self.struct_name})
