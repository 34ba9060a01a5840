"""
Method recipes.

Each recipe fixes a set of capability traits and one body rule and describes
a whole family of generated methods: field operations, filters, model
operations and create.
"""

from typing import Optional

from ..core.naming import field_name_to_arg_name, to_db_name
from .bodies import CreateBody, ModelCallBody, ScopedCallBody, WhereBody
from .descriptor import MethodBuilder, MethodConstructionError, MethodDescriptor
from .traits import ErrorReturn, NoArgs, OnFieldName, OneArg, TargetCall

# Logical comparison name -> SQL operator
FILTER_OPERATORS = {
    "eq": "=",
    "ne": "!=",
    "lt": "<",
    "lte": "<=",
    "gt": ">",
    "gte": ">=",
}


class UnknownOperatorError(MethodConstructionError):
    """A binary filter was requested for an operator outside FILTER_OPERATORS."""

    def __init__(self, operation: str):
        super().__init__(f"no operation for filter {operation!r}", operation=operation)


def _require_field_name(field_name: str, operation: str) -> None:
    if not field_name:
        raise MethodConstructionError(
            f"{operation}: field name must not be empty", operation=operation
        )


def field_operation_no_args(
    name: str,
    field_name: str,
    gorm_method: Optional[str] = None,
    transform_field_name: bool = True,
    doc: Optional[str] = None,
) -> MethodDescriptor:
    """
    Unary field operations: Preload, OrderBy, ...

    Named operation first (PreloadBooks). The field name is passed to the
    GORM call as a string literal, converted to its column name when
    transform_field_name is set.
    """
    _require_field_name(field_name, name)
    target = to_db_name(field_name) if transform_field_name else field_name
    call = TargetCall(name, gorm_method)

    return (
        MethodBuilder(name)
        .naming(OnFieldName(name, field_name, field_first=False))
        .doc(doc)
        .target_call(call)
        .body(ScopedCallBody(call.render(), f'"{target}"'))
        .build()
    )


def field_operation_one_arg(
    name: str,
    field_name: str,
    arg_type_name: str,
    gorm_method: Optional[str] = None,
    doc: Optional[str] = None,
) -> MethodDescriptor:
    """Field keyed operation taking one argument, passed straight to GORM."""
    _require_field_name(field_name, name)
    arg_name = field_name_to_arg_name(field_name)
    call = TargetCall(name, gorm_method)

    return (
        MethodBuilder(name)
        .naming(OnFieldName(name, field_name, field_first=True))
        .args(OneArg(arg_name, arg_type_name))
        .doc(doc)
        .target_call(call)
        .body(ScopedCallBody(call.render(), arg_name))
        .build()
    )


def struct_operation_one_arg(
    name: str,
    arg_type_name: str,
    gorm_method: Optional[str] = None,
    doc: Optional[str] = None,
) -> MethodDescriptor:
    """Query-set level operation with one argument: Limit(limit int)."""
    arg_name = name.lower()
    call = TargetCall(name, gorm_method)

    return (
        MethodBuilder(name)
        .args(OneArg(arg_name, arg_type_name))
        .doc(doc)
        .target_call(call)
        .body(ScopedCallBody(call.render(), arg_name))
        .build()
    )


def binary_filter(name: str, field_name: str, arg_type_name: str) -> MethodDescriptor:
    """
    Comparison filter: NameEq(name string) -> WHERE name = ?

    Raises:
        UnknownOperatorError: name is not in FILTER_OPERATORS
    """
    operator = FILTER_OPERATORS.get(name)
    if operator is None:
        raise UnknownOperatorError(name)
    _require_field_name(field_name, name)
    arg_name = field_name_to_arg_name(field_name)

    return (
        MethodBuilder(name)
        .naming(OnFieldName(name, field_name, field_first=True))
        .args(OneArg(arg_name, arg_type_name))
        .target_call(TargetCall(name, "Where"))
        .body(WhereBody(to_db_name(field_name), f"{operator} ?", arg_name))
        .build()
    )


def unary_filter(name: str, field_name: str, op: str) -> MethodDescriptor:
    """Argument-less filter with a literal condition: DeletedAtIsNull()."""
    _require_field_name(field_name, name)
    if not op:
        raise MethodConstructionError(
            f"{name}: filter condition must not be empty", operation=name
        )

    return (
        MethodBuilder(name)
        .naming(OnFieldName(name, field_name, field_first=True))
        .args(NoArgs())
        .target_call(TargetCall(name, "Where"))
        .body(WhereBody(to_db_name(field_name), op))
        .build()
    )


def model_operation(
    name: str,
    gorm_method: str,
    arg_type_name: str,
    doc: Optional[str] = None,
) -> MethodDescriptor:
    """Executes the query into ``ret`` and returns the error: All, One."""
    return (
        MethodBuilder(name)
        .args(OneArg("ret", arg_type_name))
        .returns(ErrorReturn())
        .doc(doc)
        .target_call(TargetCall(name, gorm_method))
        .body(ModelCallBody(gorm_method, "ret"))
        .build()
    )


def create_operation(struct_type_name: str, db_type_name: str = "*gorm.DB") -> MethodDescriptor:
    """Create on the struct itself: func (o *User) Create(db *gorm.DB) error."""
    if not struct_type_name:
        raise MethodConstructionError(
            "Create: struct name must not be empty", operation="Create"
        )

    return (
        MethodBuilder("Create")
        .receiver(f"o *{struct_type_name}")
        .args(OneArg("db", db_type_name))
        .returns(ErrorReturn())
        .body(CreateBody(struct_type_name))
        .build()
    )
