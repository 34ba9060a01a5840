"""
Jinja2 environment used to render query-set source.

Templates come from an optional directory on disk and from in-memory
overrides registered with add_template(); overrides win on name clashes.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    ChoiceLoader,
    DictLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
)

from .naming import to_db_name, lowercase_first, title_words


class TemplateError(Exception):
    """A query-set template is missing or failed to render."""

    pass


def indent_code(value: str, prefix: str = "\t") -> str:
    """Prefix every non-blank line of a Go block."""
    return "\n".join(
        prefix + line if line.strip() else line for line in str(value).split("\n")
    )


def go_comment(value: str) -> str:
    """Turn free text into a // comment block, keeping paragraph breaks."""
    return "\n".join(
        f"// {line.rstrip()}" if line.strip() else "//"
        for line in str(value).strip().split("\n")
    )


class TemplateEngine:
    """Renders the Go templates of a generator."""

    def __init__(self, template_dir: Optional[Path] = None):
        self.template_dir = template_dir
        self._memory_templates: Dict[str, str] = {}

        loaders = [DictLoader(self._memory_templates)]
        if template_dir and template_dir.exists():
            loaders.append(FileSystemLoader(str(template_dir)))

        # Generated Go code must never be HTML-escaped
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )
        self._env.filters.update(
            db_name=to_db_name,
            lower_first=lowercase_first,
            title_words=title_words,
            indent_code=indent_code,
            comment=go_comment,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a named template.

        Raises:
            TemplateError: the template is unknown, references an undefined
                variable, or fails to render
        """
        try:
            return self._env.get_template(template_name).render(**context)
        except JinjaTemplateError as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def add_template(self, name: str, content: str):
        """Register an in-memory template that shadows a file of the same name."""
        self._memory_templates[name] = content

    def template_exists(self, template_name: str) -> bool:
        return template_name in self._env.list_templates()


_default_engine = None


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Engine over template_dir, or a shared memory-only engine without one."""
    global _default_engine
    if template_dir is not None:
        return TemplateEngine(template_dir)
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine
