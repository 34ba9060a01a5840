"""
Go query-set generator.

Plans the query-set methods for every model struct, builds their descriptors
and renders a complete Go file through the templates in ./templates.
"""

from functools import partial
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ....logging_config import get_logger
from ...core.config import ConfigError, GeneratorConfig, load_config
from ...core.generator import GeneratorError
from ...core.naming import field_name_to_arg_name
from ...core.schema import Field, FieldKind, Schema
from ...core.templates import create_template_engine
from ...methods import (
    STRUCT_METHOD_FACTORIES,
    MethodConstructionError,
    MethodDescriptor,
    binary_filter_method,
    is_not_null_method,
    is_null_method,
    order_by_method,
    preload_method,
)
from .config import GoConfig, format_go_import, split_go_imports
from .naming import go_argument_problems, go_package_name_style_warnings

logger = get_logger(__name__)

# (operation label, descriptor thunk)
PlannedMethod = Tuple[str, Callable[[], MethodDescriptor]]

_BOOLEAN_FILTERS = ("eq", "ne")

TEMPLATE_DIR = Path(__file__).parent / "templates"


class GoQuerySetGenerator:
    """Code generator for GORM query sets."""

    language_name = "go"
    file_extension = ".go"

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = GoConfig.from_config(config or GeneratorConfig())
        self.template_engine = create_template_engine(TEMPLATE_DIR)

        # State tracking for the last generate() call
        self._warnings: List[str] = []
        self.last_run_stats: Dict[str, int] = {}

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    # Planning

    def plan_field_methods(self, field: Field) -> List[PlannedMethod]:
        """Pick the methods generated for one field, based on its kind."""
        kind = field.kind
        plan: List[PlannedMethod] = []

        if kind in (FieldKind.SLICE, FieldKind.STRUCT):
            if self.config.generate_preload:
                plan.append(("Preload", partial(preload_method, field.name)))
            return plan

        if kind == FieldKind.POINTER:
            if self.config.generate_null_checks:
                plan.append(("IsNull", partial(is_null_method, field.name)))
                plan.append(("IsNotNull", partial(is_not_null_method, field.name)))
            return plan

        operations = self.config.binary_filters
        if kind == FieldKind.BOOLEAN:
            operations = [op for op in operations if op in _BOOLEAN_FILTERS]

        for op in operations:
            plan.append(
                (op, partial(binary_filter_method, op, field.name, field.type_name))
            )

        if self.config.generate_order_by and field.is_comparable:
            plan.append(("OrderBy", partial(order_by_method, field.name)))

        return plan

    def plan_struct_methods(self, schema: Schema) -> List[PlannedMethod]:
        """Query-set level methods selected by config.struct_methods."""
        return [
            (name, partial(STRUCT_METHOD_FACTORIES[name], schema.name))
            for name in self.config.struct_methods
        ]

    def build_methods(
        self, schema: Schema
    ) -> Tuple[List[MethodDescriptor], List[str]]:
        """
        Build every planned method of a struct.

        Returns:
            (descriptors sorted by method name, skipped-method warnings)

        Raises:
            GeneratorError: a method failed to build and fail_fast is set
        """
        planned = []
        for field in schema.fields:
            planned.extend((field.name, label, thunk)
                           for label, thunk in self.plan_field_methods(field))
        planned.extend((None, label, thunk)
                       for label, thunk in self.plan_struct_methods(schema))

        methods: List[MethodDescriptor] = []
        skipped: List[str] = []
        seen = set()

        for field_name, label, thunk in planned:
            where = f"{schema.name}.{field_name}" if field_name else schema.name
            try:
                method = thunk()
                if method.method_name in seen:
                    raise MethodConstructionError(
                        f"method {method.method_name} is already defined", label
                    )
            except MethodConstructionError as e:
                if self.config.fail_fast:
                    logger.error("Cannot build %s for %s: %s", label, where, e)
                    raise GeneratorError(
                        f"Cannot build {label} for {where}: {e}"
                    ) from e
                logger.warning("Skipping %s for %s: %s", label, where, e)
                skipped.append(f"Skipped {label} for {where}: {e}")
                continue

            logger.debug("Planned %s.%s", schema.query_set_name, method.method_name)
            seen.add(method.method_name)
            methods.append(method)

        methods.sort(key=lambda m: m.method_name)
        return methods, skipped

    # Rendering

    def generate(self, schemas: Dict[str, Schema]) -> str:
        """Generate the complete Go file for all structs."""
        self._warnings = []

        built: Dict[str, List[MethodDescriptor]] = {}
        for name, schema in schemas.items():
            methods, skipped = self.build_methods(schema)
            built[name] = methods
            self._warnings.extend(skipped)

        sections = [
            self._render_query_set(schemas[name], methods)
            for name, methods in built.items()
        ]

        all_methods = [m for methods in built.values() for m in methods]
        imports = split_go_imports(self._imports_for(all_methods))

        self.last_run_stats = {
            "method_count": len(all_methods),
            "skipped_methods": len(self._warnings),
        }

        return self.render_template(
            "file.go.j2",
            {
                "package_name": self.config.package_name,
                "std_imports": imports["std"],
                "external_imports": imports["external"],
                "sections": sections,
            },
        )

    def generate_single_schema(self, schema: Schema) -> str:
        """Render the query set of one struct without the file header."""
        methods, _ = self.build_methods(schema)
        return self._render_query_set(schema, methods)

    def _render_query_set(self, schema: Schema, methods: List[MethodDescriptor]) -> str:
        return self.render_template(
            "queryset.go.j2",
            {
                "struct_name": schema.name,
                "qs_type": schema.query_set_name,
                "description": schema.description,
                "methods": [self.render_method(m, schema) for m in methods],
            },
        )

    def render_method(self, method: MethodDescriptor, schema: Schema) -> str:
        """Render one method declaration with its doc comment."""
        qs_type = schema.query_set_name
        return self.render_template(
            "method.go.j2",
            {
                "doc": method.doc if self.config.add_comments else None,
                "receiver": method.receiver_declaration or f"qs {qs_type}",
                "name": method.method_name,
                "args": method.args_declaration,
                "returns": method.return_values_declaration(qs_type),
                "body": method.body,
            },
        )

    def _imports_for(self, methods: List[MethodDescriptor]) -> List[str]:
        imports = {format_go_import(self.config.gorm_import)}
        for method in methods:
            if "fmt." in method.body:
                imports.add('"fmt"')
            if "time." in method.args_declaration:
                imports.add('"time"')
        return sorted(imports)

    def get_import_statements(self, schemas: Dict[str, Schema]) -> List[str]:
        """Imports the generated file needs."""
        methods = []
        for schema in schemas.values():
            built, _ = self.build_methods(schema)
            methods.extend(built)
        return self._imports_for(methods)

    def collect_warnings(self) -> List[str]:
        return list(self._warnings)

    def validate_schemas(self, schemas: Dict[str, Schema]) -> List[str]:
        """Warnings about structs that generate poorly or not at all."""
        warnings = []

        for schema in schemas.values():
            if not schema.fields:
                warnings.append(f"Struct '{schema.name}' has no fields")
            for field in schema.fields:
                if field.kind in (FieldKind.SLICE, FieldKind.STRUCT, FieldKind.POINTER):
                    continue
                arg_name = field_name_to_arg_name(field.name)
                for problem in go_argument_problems(arg_name):
                    warnings.append(
                        f"Argument of {schema.name}.{field.name} filters: {problem}"
                    )

        for warning in go_package_name_style_warnings(self.config.package_name):
            warnings.append(f"{warning}: {self.config.package_name}")

        return warnings


ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


def create_go_generator(config: ConfigSource = None) -> GoQuerySetGenerator:
    """
    Create a Go query-set generator.

    Args:
        config: a GeneratorConfig, a dict of overrides, a path to a JSON
            config file, or None for the defaults

    Raises:
        ConfigError: the configuration can't be read or is invalid
    """
    if isinstance(config, (str, Path)):
        config = load_config(config_file=config)
    elif isinstance(config, dict) or config is None:
        config = load_config(custom_config=config)
    elif not isinstance(config, GeneratorConfig):
        raise ConfigError(f"Invalid config type: {type(config).__name__}")
    return GoQuerySetGenerator(config)
