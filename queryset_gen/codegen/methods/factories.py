"""
One factory per generated query-set method.

Every factory is a pure function of model metadata; calling it twice with
the same input yields equal descriptors.
"""

from .descriptor import MethodDescriptor
from .recipes import (
    binary_filter,
    create_operation,
    field_operation_no_args,
    model_operation,
    struct_operation_one_arg,
    unary_filter,
)

ONE_DOC = """\
// One is used to retrieve one result. It returns gorm.ErrRecordNotFound
// if nothing was fetched"""


def preload_method(field_name: str) -> MethodDescriptor:
    # Preload takes the association name, not a column
    return field_operation_no_args("Preload", field_name, transform_field_name=False)


def order_by_method(field_name: str) -> MethodDescriptor:
    return field_operation_no_args("OrderBy", field_name, gorm_method="Order")


def limit_method() -> MethodDescriptor:
    return struct_operation_one_arg("Limit", "int")


def offset_method() -> MethodDescriptor:
    return struct_operation_one_arg("Offset", "int")


def all_method(struct_name: str) -> MethodDescriptor:
    return model_operation("All", "Find", f"*[]{struct_name}")


def one_method(struct_name: str) -> MethodDescriptor:
    return model_operation("One", "First", f"*{struct_name}", doc=ONE_DOC)


def binary_filter_method(
    operation: str, field_name: str, arg_type_name: str
) -> MethodDescriptor:
    return binary_filter(operation, field_name, arg_type_name)


def eq_method(field_name: str, arg_type_name: str) -> MethodDescriptor:
    return binary_filter("eq", field_name, arg_type_name)


def ne_method(field_name: str, arg_type_name: str) -> MethodDescriptor:
    return binary_filter("ne", field_name, arg_type_name)


def lt_method(field_name: str, arg_type_name: str) -> MethodDescriptor:
    return binary_filter("lt", field_name, arg_type_name)


def lte_method(field_name: str, arg_type_name: str) -> MethodDescriptor:
    return binary_filter("lte", field_name, arg_type_name)


def gt_method(field_name: str, arg_type_name: str) -> MethodDescriptor:
    return binary_filter("gt", field_name, arg_type_name)


def gte_method(field_name: str, arg_type_name: str) -> MethodDescriptor:
    return binary_filter("gte", field_name, arg_type_name)


def is_null_method(field_name: str) -> MethodDescriptor:
    return unary_filter("IsNull", field_name, "IS NULL")


def is_not_null_method(field_name: str) -> MethodDescriptor:
    return unary_filter("IsNotNull", field_name, "IS NOT NULL")


def create_method(struct_name: str) -> MethodDescriptor:
    return create_operation(struct_name)


# Struct level methods selectable by name in GeneratorConfig.struct_methods
STRUCT_METHOD_FACTORIES = {
    "Limit": lambda struct_name: limit_method(),
    "Offset": lambda struct_name: offset_method(),
    "All": all_method,
    "One": one_method,
    "Create": create_method,
}
