"""
Core schema representation for code generation.

Converts the model scanner's JSON description into a normalized internal
format that generators can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any
from enum import Enum


class SchemaError(Exception):
    """Raised when a model description is malformed."""

    pass


class FieldKind(Enum):
    """Kinds of Go field types the generator distinguishes."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    POINTER = "pointer"  # *T, nullable column
    SLICE = "slice"  # []T, has-many association
    STRUCT = "struct"  # named type, belongs-to / has-one association


_INTEGER_TYPES = {
    "int", "int8", "int16", "int32", "int64",
    "uint", "uint8", "uint16", "uint32", "uint64",
    "byte", "rune",
}
_FLOAT_TYPES = {"float32", "float64"}
_TIMESTAMP_TYPES = {"time.Time"}

# Fields GORM's embedded gorm.Model contributes to a struct
GORM_MODEL_FIELDS = (
    ("ID", "uint"),
    ("CreatedAt", "time.Time"),
    ("UpdatedAt", "time.Time"),
    ("DeletedAt", "*time.Time"),
)


def classify_type(type_name: str) -> FieldKind:
    """Map a declared Go type to its FieldKind."""
    if type_name.startswith("[]"):
        return FieldKind.SLICE
    if type_name.startswith("*"):
        return FieldKind.POINTER
    if type_name == "string":
        return FieldKind.STRING
    if type_name == "bool":
        return FieldKind.BOOLEAN
    if type_name in _INTEGER_TYPES:
        return FieldKind.INTEGER
    if type_name in _FLOAT_TYPES:
        return FieldKind.FLOAT
    if type_name in _TIMESTAMP_TYPES:
        return FieldKind.TIMESTAMP
    return FieldKind.STRUCT


@dataclass
class Field:
    """A single struct field as reported by the model scanner."""

    name: str
    type_name: str
    # Promoted from an embedded gorm.Model; an explicit field shadows it
    promoted: bool = False

    @property
    def kind(self) -> FieldKind:
        return classify_type(self.type_name)

    @property
    def is_comparable(self) -> bool:
        """Whether ordering comparisons (<, >) make sense for this field."""
        return self.kind in (
            FieldKind.STRING,
            FieldKind.INTEGER,
            FieldKind.FLOAT,
            FieldKind.TIMESTAMP,
        )


@dataclass
class Schema:
    """A model struct: its name and fields in declaration order."""

    name: str
    fields: List[Field] = field(default_factory=list)
    description: Optional[str] = None

    def add_field(self, field: Field) -> None:
        """
        Add a field, applying Go's shadowing rule for promoted fields.

        An explicit field replaces a promoted one of the same name, a promoted
        field never replaces anything, and any other repeated name is an error.

        Raises:
            SchemaError: the struct already has a field with this name
        """
        for index, existing in enumerate(self.fields):
            if existing.name != field.name:
                continue
            if existing.promoted and not field.promoted:
                self.fields[index] = field
                return
            if field.promoted and not existing.promoted:
                return
            raise SchemaError(f"Duplicate field {field.name} in struct {self.name}")
        self.fields.append(field)

    def get_field(self, name: str) -> Optional[Field]:
        """Get field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    @property
    def query_set_name(self) -> str:
        return f"{self.name}QuerySet"


@dataclass
class ModelDescription:
    """Everything the scanner reported for one Go package."""

    package_name: Optional[str]
    schemas: Dict[str, Schema] = field(default_factory=dict)


def embedded_field_name(type_name: str) -> str:
    """An embedded field is named after its type: *pkg.Base -> Base."""
    return type_name.lstrip("*").rsplit(".", 1)[-1]


def _convert_field(raw: Any, struct_name: str, index: int) -> List[Field]:
    """Convert one raw field entry, expanding an embedded gorm.Model."""
    if not isinstance(raw, dict):
        raise SchemaError(f"Field #{index} of struct {struct_name} must be an object")

    type_name = raw.get("type")
    if not type_name or not isinstance(type_name, str):
        raise SchemaError(
            f"Field #{index} of struct {struct_name} has no type"
        )

    if raw.get("embedded") and type_name == "gorm.Model":
        return [
            Field(name=name, type_name=t, promoted=True)
            for name, t in GORM_MODEL_FIELDS
        ]

    name = raw.get("name")
    if not name and raw.get("embedded"):
        name = embedded_field_name(type_name)
    if not name or not isinstance(name, str):
        raise SchemaError(f"Field #{index} of struct {struct_name} has no name")
    if not name.isidentifier():
        raise SchemaError(
            f"Field name {name!r} of struct {struct_name} is not an identifier"
        )

    return [Field(name=name, type_name=type_name)]


def convert_model_description(data: Dict[str, Any]) -> ModelDescription:
    """
    Convert the scanner's JSON output to internal Schema objects.

    Expected shape::

        {"package": "models",
         "structs": [{"name": "User",
                      "fields": [{"name": "Name", "type": "string"}]}]}

    Args:
        data: Parsed JSON model description

    Returns:
        ModelDescription with schemas keyed by struct name, in input order

    Raises:
        SchemaError: If the description is malformed
    """
    if not isinstance(data, dict):
        raise SchemaError(
            f"Model description must be a JSON object, got {type(data).__name__}"
        )

    structs = data.get("structs")
    if not isinstance(structs, list):
        raise SchemaError("Model description needs a 'structs' list")

    schemas: Dict[str, Schema] = {}
    for struct_index, raw_struct in enumerate(structs):
        if not isinstance(raw_struct, dict):
            raise SchemaError(f"Struct #{struct_index} must be an object")

        struct_name = raw_struct.get("name")
        if not struct_name or not isinstance(struct_name, str):
            raise SchemaError(f"Struct #{struct_index} has no name")
        if struct_name in schemas:
            raise SchemaError(f"Duplicate struct: {struct_name}")

        description = raw_struct.get("description")
        if description is not None and not isinstance(description, str):
            raise SchemaError(f"Description of struct {struct_name} must be a string")

        schema = Schema(name=struct_name, description=description or None)
        for field_index, raw_field in enumerate(raw_struct.get("fields", [])):
            for converted in _convert_field(raw_field, struct_name, field_index):
                schema.add_field(converted)

        schemas[struct_name] = schema

    return ModelDescription(package_name=data.get("package"), schemas=schemas)
