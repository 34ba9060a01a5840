"""
tests/conftest.py
Shared fixtures for the queryset-gen test suite.

Real file I/O happens inside pytest's tmp_path directories; network access
is replaced with monkeypatch where needed.
"""

from __future__ import annotations

import copy
import json
import pathlib
from typing import Any, Dict

import pytest

from queryset_gen.codegen.core.config import GeneratorConfig
from queryset_gen.codegen.core.schema import convert_model_description
from queryset_gen.codegen.languages.go import GoQuerySetGenerator


# ---------------------------------------------------------------------------
# Model description fixtures
# ---------------------------------------------------------------------------

_MODEL: Dict[str, Any] = {
    "package": "models",
    "structs": [
        {
            "name": "User",
            "fields": [
                {"name": "Model", "type": "gorm.Model", "embedded": True},
                {"name": "Name", "type": "string"},
                {"name": "Age", "type": "int"},
                {"name": "Active", "type": "bool"},
                {"name": "Books", "type": "[]Book"},
            ],
        },
        {
            "name": "Book",
            "fields": [
                {"name": "Title", "type": "string"},
                {"name": "UserID", "type": "uint"},
                {"name": "Author", "type": "User"},
            ],
        },
    ],
}


@pytest.fixture()
def model_dict() -> Dict[str, Any]:
    """Return a deep copy so each test can mutate freely."""
    return copy.deepcopy(_MODEL)


@pytest.fixture()
def model_path(model_dict: Dict[str, Any], tmp_path: pathlib.Path) -> pathlib.Path:
    """Write the model description to a temporary JSON file."""
    path = tmp_path / "models.json"
    path.write_text(json.dumps(model_dict), encoding="utf-8")
    return path


@pytest.fixture()
def schemas(model_dict: Dict[str, Any]):
    return convert_model_description(model_dict).schemas


@pytest.fixture()
def user_schema(schemas):
    return schemas["User"]


_EXAMPLE_CONFIG: Dict[str, Any] = {
    "package_name": "models",
    "gorm_import": "github.com/jinzhu/gorm",
    "binary_filters": ["eq", "ne", "lt", "gt"],
    "struct_methods": ["Limit", "All", "One", "Create"],
    "generate_order_by": True,
    "fail_fast": False,
}


@pytest.fixture()
def example_config_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """A hand-written config file of the kind shipped next to a models.json."""
    path = tmp_path / "queryset-gen.json"
    path.write_text(json.dumps(_EXAMPLE_CONFIG), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Generator fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def go_generator() -> GoQuerySetGenerator:
    return GoQuerySetGenerator(GeneratorConfig())


@pytest.fixture()
def make_generator():
    """Build a generator with config overrides: make_generator(fail_fast=False)."""

    def _make(**overrides) -> GoQuerySetGenerator:
        return GoQuerySetGenerator(GeneratorConfig(**overrides))

    return _make
