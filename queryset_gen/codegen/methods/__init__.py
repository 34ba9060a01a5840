"""
Method-descriptor composition framework.

Capability traits, body templates, recipes and the per-method factories
that describe every generated query-set method.
"""

from .descriptor import MethodBuilder, MethodConstructionError, MethodDescriptor
from .recipes import (
    FILTER_OPERATORS,
    UnknownOperatorError,
    binary_filter,
    create_operation,
    field_operation_no_args,
    field_operation_one_arg,
    model_operation,
    struct_operation_one_arg,
    unary_filter,
)
from .factories import (
    ONE_DOC,
    STRUCT_METHOD_FACTORIES,
    all_method,
    binary_filter_method,
    create_method,
    eq_method,
    gt_method,
    gte_method,
    is_not_null_method,
    is_null_method,
    limit_method,
    lt_method,
    lte_method,
    ne_method,
    offset_method,
    one_method,
    order_by_method,
    preload_method,
)

__all__ = [
    "MethodBuilder",
    "MethodConstructionError",
    "MethodDescriptor",
    "FILTER_OPERATORS",
    "UnknownOperatorError",
    # Recipes
    "binary_filter",
    "create_operation",
    "field_operation_no_args",
    "field_operation_one_arg",
    "model_operation",
    "struct_operation_one_arg",
    "unary_filter",
    # Factories
    "ONE_DOC",
    "STRUCT_METHOD_FACTORIES",
    "all_method",
    "binary_filter_method",
    "create_method",
    "eq_method",
    "gt_method",
    "gte_method",
    "is_not_null_method",
    "is_null_method",
    "limit_method",
    "lt_method",
    "lte_method",
    "ne_method",
    "offset_method",
    "one_method",
    "order_by_method",
    "preload_method",
]
