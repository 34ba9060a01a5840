"""
Running a query-set generator and collecting its result.

generate_code() drives a generator through validation, rendering and source
cleanup, and turns generator and template failures into a failed
GenerationResult instead of an exception.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .schema import Schema
from .templates import TemplateError

logger = get_logger(__name__)


class GeneratorError(Exception):
    """A query set could not be generated."""

    pass


def tidy_source(code: str) -> str:
    """Strip trailing spaces, fold blank runs to one line, end with one newline."""
    tidy: List[str] = []
    for line in code.split("\n"):
        line = line.rstrip()
        if line or (tidy and tidy[-1]):
            tidy.append(line)
    while tidy and not tidy[-1]:
        tidy.pop()
    return "\n".join(tidy) + "\n"


@dataclass
class GenerationResult:
    """Generated source plus warnings and run metadata, or an error."""

    code: str
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)
    error_message: Optional[str] = None
    exception: Optional[Exception] = None

    @property
    def success(self) -> bool:
        return self.error_message is None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        return cls(code="", error_message=message, exception=exception)


def generate_code(generator, schemas: Dict[str, Schema]) -> GenerationResult:
    """
    Generate one source file for all schemas.

    Args:
        generator: a GoQuerySetGenerator, or anything with the same
            validate_schemas / generate / collect_warnings interface
        schemas: struct name -> Schema, in declaration order

    Returns:
        GenerationResult; success is False when a method failed to build
        under fail_fast or a template failed to render
    """
    try:
        warnings = generator.validate_schemas(schemas)
        code = tidy_source(generator.generate(schemas))
        warnings.extend(generator.collect_warnings())
    except (GeneratorError, TemplateError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "package": generator.config.package_name,
        "struct_count": len(schemas),
        "field_count": sum(len(schema.fields) for schema in schemas.values()),
        **generator.last_run_stats,
    }
    logger.info("Generated query sets for %d struct(s)", len(schemas))
    return GenerationResult(code, warnings, metadata)
