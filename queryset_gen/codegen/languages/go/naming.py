"""
Identifier checks for generated Go.

Filter methods turn field names into argument names, and the model's package
name becomes the package clause, so both are checked against Go's keywords
and predeclared identifiers before anything is rendered.
"""

from typing import List

from ...core.naming import NameSanitizer

GO_KEYWORDS = frozenset("""
    break case chan const continue default defer else fallthrough for func go
    goto if import interface map package range return select struct switch
    type var
""".split())

# Types, constants and functions of the universe block
GO_PREDECLARED = frozenset("""
    any bool byte comparable complex64 complex128 error float32 float64 int
    int8 int16 int32 int64 rune string uint uint8 uint16 uint32 uint64 uintptr
    true false iota nil
    append cap clear close complex copy delete imag len make max min new panic
    print println real recover
""".split())

# Receiver and scope-closure parameter bound by every chainable method
QUERY_SET_LOCALS = frozenset({"qs", "d"})


def create_go_sanitizer() -> NameSanitizer:
    return NameSanitizer(GO_KEYWORDS, GO_PREDECLARED)


def go_argument_problems(arg_name: str) -> List[str]:
    """
    Problems with a generated method argument name.

    An argument named like a query-set local compiles but binds the wrong
    value inside the scope closure, or clashes with the receiver.
    """
    problems = create_go_sanitizer().check_identifier(arg_name)
    if arg_name in QUERY_SET_LOCALS:
        problems.append(f"'{arg_name}' collides with a query-set local")
    return problems


def validate_go_package_name(name: str) -> List[str]:
    """Errors the Go compiler would report for this package clause."""
    if not name:
        return ["Package name cannot be empty"]

    errors = []
    if not (name.isascii() and name.isidentifier()):
        errors.append(f"'{name}' is not a valid Go identifier")
    if name in GO_KEYWORDS:
        errors.append(f"'{name}' is a Go reserved word")
    return errors


def go_package_name_style_warnings(name: str) -> List[str]:
    """Conventions golint reports on but the compiler accepts."""
    warnings = []
    if name[:1].isupper():
        warnings.append("Package names should be lowercase")
    if "_" in name:
        warnings.append("Package names should not contain underscores")
    return warnings
