"""
Go-specific configuration and validation.

Extends the base configuration system with Go-specific checks.
"""

from dataclasses import dataclass, fields
from typing import Dict, Any, List

from ...core.config import ConfigError, GeneratorConfig
from ...methods.factories import STRUCT_METHOD_FACTORIES
from .naming import validate_go_package_name


@dataclass
class GoConfig(GeneratorConfig):
    """Go-specific configuration, validated on construction."""

    def __post_init__(self):
        # A repeated operation would plan the same method twice
        self.binary_filters = list(dict.fromkeys(self.binary_filters))
        self.struct_methods = list(dict.fromkeys(self.struct_methods))
        self._validate_go_settings()

    def _validate_go_settings(self):
        """Validate Go-specific configuration."""
        errors = validate_go_package_name(self.package_name)
        if errors:
            raise ConfigError(
                f"Invalid Go package name {self.package_name!r}: {'; '.join(errors)}"
            )

        unknown = [m for m in self.struct_methods if m not in STRUCT_METHOD_FACTORIES]
        if unknown:
            raise ConfigError(
                f"Unknown struct methods: {', '.join(unknown)}. "
                f"Available: {', '.join(STRUCT_METHOD_FACTORIES)}"
            )

        if not self.gorm_import:
            raise ConfigError("gorm_import must not be empty")

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "GoConfig":
        """Build a validated GoConfig from a generic GeneratorConfig."""
        if isinstance(config, cls):
            return config
        values = {f.name: getattr(config, f.name) for f in fields(GeneratorConfig)}
        return cls(**values)


def format_go_import(path: str) -> str:
    """Quote an import path: github.com/jinzhu/gorm -> "github.com/jinzhu/gorm"."""
    path = path.strip()
    if path.startswith('"') and path.endswith('"'):
        return path
    return f'"{path}"'


def split_go_imports(imports: List[str]) -> Dict[str, List[str]]:
    """
    Group quoted import paths the way goimports does.

    Standard library paths have no dot in their first element.
    """
    groups: Dict[str, List[str]] = {"std": [], "external": []}
    for imp in sorted(set(imports)):
        first = imp.strip('"').split("/", 1)[0]
        groups["external" if "." in first else "std"].append(imp)
    return groups


# Preset for query sets that never write
READ_ONLY_CONFIG: Dict[str, Any] = {
    "struct_methods": ["Limit", "Offset", "All", "One"],
}
