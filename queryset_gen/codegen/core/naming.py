"""
Naming utilities for generated code.

Handles the column-name transform (struct field name -> database column name),
argument-name derivation and reserved-word checks.
"""

from typing import Dict, List, Set

# Initialisms GORM keeps together when snake-casing, in lookup priority order.
COMMON_INITIALISMS = [
    "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML", "HTTP",
    "HTTPS", "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS", "RPC", "SLA",
    "SMTP", "SSH", "TLS", "TTL", "UID", "UI", "UUID", "URI", "URL", "UTF8",
    "VM", "XML", "XSRF", "XSS",
]

_db_name_cache: Dict[str, str] = {}


def _replace_initialisms(name: str) -> str:
    """Rewrite initialisms as title case ("UserID" -> "UserId")."""
    out = []
    i = 0
    while i < len(name):
        for initialism in COMMON_INITIALISMS:
            if name.startswith(initialism, i):
                out.append(initialism.title())
                i += len(initialism)
                break
        else:
            out.append(name[i])
            i += 1
    return "".join(out)


def to_db_name(name: str) -> str:
    """
    Convert a struct field name to its database column name.

    Follows GORM's ToDBName: initialisms are kept as one word and an
    underscore is inserted at every lower -> upper boundary.

    Examples:
        UserID    -> user_id
        DeletedAt -> deleted_at
        HTMLBody  -> html_body
    """
    if name in _db_name_cache:
        return _db_name_cache[name]
    if not name:
        return ""

    value = _replace_initialisms(name)
    buf = []
    last_case = curr_case = False

    for i, ch in enumerate(value[:-1]):
        nxt = value[i + 1]
        next_case = nxt.isascii() and nxt.isupper()
        next_number = nxt.isdigit()

        if i > 0:
            if curr_case:
                if last_case and (next_case or next_number):
                    buf.append(ch)
                else:
                    if value[i - 1] != "_" and nxt != "_":
                        buf.append("_")
                    buf.append(ch)
            else:
                buf.append(ch)
                if i == len(value) - 2 and next_case and not next_number:
                    buf.append("_")
        else:
            curr_case = True
            buf.append(ch)

        last_case = curr_case
        curr_case = next_case

    buf.append(value[-1])
    result = "".join(buf).lower()
    _db_name_cache[name] = result
    return result


def lowercase_first(name: str) -> str:
    """Lowercase the first character only."""
    if not name:
        return name
    return name[0].lower() + name[1:]


def title_words(name: str) -> str:
    """Uppercase the first letter of every space separated word, keep the rest."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


def field_name_to_arg_name(field_name: str) -> str:
    """
    Derive a method argument name from a field name.

    "ID" is kept as is; everything else gets its first letter lowercased.
    """
    if field_name == "ID":
        return field_name

    return lowercase_first(field_name)


class NameSanitizer:
    """Checks generated identifiers against a language's reserved names."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()

    def is_reserved(self, name: str) -> bool:
        """True if name is a reserved word of the target language."""
        return name in self.reserved_words

    def is_builtin(self, name: str) -> bool:
        """True if name shadows a builtin type or function."""
        return name in self.builtin_types

    def check_identifier(self, name: str) -> List[str]:
        """
        Report problems with an identifier.

        Returns:
            List of problem descriptions (empty if the name is safe)
        """
        problems = []
        if not name:
            problems.append("identifier is empty")
            return problems
        if not name.isidentifier():
            problems.append(f"'{name}' is not a valid identifier")
        if self.is_reserved(name):
            problems.append(f"'{name}' is a reserved word")
        elif self.is_builtin(name):
            problems.append(f"'{name}' shadows a builtin")
        return problems
