"""
tests/test_descriptor.py
Unit tests for capability traits, body rules and MethodBuilder.
"""

import dataclasses

import pytest

from queryset_gen.codegen.methods.bodies import (
    CreateBody,
    ModelCallBody,
    ScopedCallBody,
    WhereBody,
    wrap_in_scope,
)
from queryset_gen.codegen.methods.descriptor import (
    MethodBuilder,
    MethodConstructionError,
    MethodDescriptor,
)
from queryset_gen.codegen.methods.traits import (
    DEFAULT_DOC_TEMPLATE,
    Doc,
    ErrorReturn,
    NoArgs,
    OnFieldName,
    OneArg,
    PlainName,
    QuerySetReturn,
    Receiver,
    TargetCall,
)


# ---------------------------------------------------------------------------
# Traits
# ---------------------------------------------------------------------------


class TestNamingTraits:
    def test_plain_name(self):
        assert PlainName("Limit").render() == "Limit"

    def test_field_first(self):
        assert OnFieldName("eq", "Name").render() == "NameEq"
        assert OnFieldName("IsNull", "DeletedAt").render() == "DeletedAtIsNull"

    def test_operation_first(self):
        assert OnFieldName("Preload", "Books", field_first=False).render() == "PreloadBooks"
        assert OnFieldName("OrderBy", "Name", field_first=False).render() == "OrderByName"


class TestArgsAndReturns:
    def test_no_args(self):
        assert NoArgs().render() == ""

    def test_one_arg(self):
        assert OneArg("name", "string").render() == "name string"
        assert OneArg("ret", "*[]User").render() == "ret *[]User"

    def test_query_set_return(self):
        assert QuerySetReturn().render("UserQuerySet") == "UserQuerySet"

    def test_error_return_ignores_query_set(self):
        assert ErrorReturn().render("UserQuerySet") == "error"

    def test_receiver_defaults_to_empty(self):
        assert Receiver().render() == ""
        assert Receiver("o *User").render() == "o *User"


class TestTargetCall:
    def test_defaults_to_logical_name(self):
        assert TargetCall("Limit").render() == "Limit"

    def test_override(self):
        assert TargetCall("OrderBy", "Order").render() == "Order"


class TestDoc:
    def test_explicit_text(self):
        assert Doc("// custom").render("Limit") == "// custom"

    def test_fallback(self):
        assert Doc().render("NameEq") == (
            "// NameEq is an autogenerated method\n// nolint: dupl"
        )

    def test_empty_text_falls_back(self):
        assert Doc("").render("X") == DEFAULT_DOC_TEMPLATE.format(name="X")


# ---------------------------------------------------------------------------
# Body rules
# ---------------------------------------------------------------------------


class TestBodies:
    def test_scope_wrapping(self):
        assert wrap_in_scope("return d") == (
            "qs.db = qs.db.Scopes(func(d *gorm.DB) *gorm.DB {\n"
            "\treturn d\n"
            "})\n"
            "return qs"
        )

    def test_scoped_call(self):
        body = ScopedCallBody("Limit", "limit").render()
        assert "\treturn d.Limit(limit)\n" in body
        assert body.endswith("return qs")

    def test_parameterized_where(self):
        body = WhereBody("name", "= ?", "name").render()
        assert '\treturn d.Where("name = ?", name)\n' in body

    def test_literal_where(self):
        body = WhereBody("deleted_at", "IS NULL").render()
        assert '\treturn d.Where("deleted_at IS NULL")\n' in body

    def test_model_call_is_not_scoped(self):
        assert ModelCallBody("Find", "ret").render() == "return qs.db.Find(ret).Error"

    def test_create(self):
        body = CreateBody("User").render()
        assert body.startswith("if err := db.Create(o).Error; err != nil {")
        assert "can't create User %v: %s" in body
        assert body.endswith("return nil")


# ---------------------------------------------------------------------------
# MethodBuilder
# ---------------------------------------------------------------------------


def _limit() -> MethodDescriptor:
    return (
        MethodBuilder("Limit")
        .args(OneArg("limit", "int"))
        .body(ScopedCallBody("Limit", "limit"))
        .build()
    )


class TestMethodBuilder:
    def test_defaults(self):
        method = _limit()
        assert method.method_name == "Limit"
        assert method.receiver_declaration == ""
        assert method.return_values_declaration("UserQuerySet") == "UserQuerySet"
        assert method.is_chainable
        assert method.doc == "// Limit is an autogenerated method\n// nolint: dupl"
        assert method.gorm_call == "Limit"

    def test_signature(self):
        assert _limit().signature("UserQuerySet") == "Limit(limit int) UserQuerySet"

    def test_missing_body(self):
        with pytest.raises(MethodConstructionError, match="has no body rule"):
            MethodBuilder("Limit").build()

    def test_empty_name(self):
        with pytest.raises(MethodConstructionError):
            MethodBuilder("").body(ScopedCallBody("Limit", "limit")).build()

    def test_descriptor_is_immutable(self):
        method = _limit()
        with pytest.raises(dataclasses.FrozenInstanceError):
            method.name = "Offset"

    def test_equal_inputs_give_equal_descriptors(self):
        assert _limit() == _limit()
        assert hash(_limit()) == hash(_limit())

    def test_error_return_is_not_chainable(self):
        method = (
            MethodBuilder("All")
            .args(OneArg("ret", "*[]User"))
            .returns(ErrorReturn())
            .body(ModelCallBody("Find", "ret"))
            .build()
        )
        assert not method.is_chainable
        assert method.signature("UserQuerySet") == "All(ret *[]User) error"
