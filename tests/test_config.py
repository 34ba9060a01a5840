"""
tests/test_config.py
Tests for GeneratorConfig loading and the Go-specific configuration checks.
"""

from __future__ import annotations

import json

import pytest

from queryset_gen.codegen.core.config import (
    DEFAULT_BINARY_FILTERS,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    get_config_manager,
    load_config,
    load_config_file,
)
from queryset_gen.codegen.languages.go import GoQuerySetGenerator
from queryset_gen.codegen.languages.go.config import (
    GoConfig,
    format_go_import,
    split_go_imports,
)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def test_defaults():
    config = load_config()
    assert config.package_name == "models"
    assert config.gorm_import == "github.com/jinzhu/gorm"
    assert config.binary_filters == DEFAULT_BINARY_FILTERS
    assert config.struct_methods == ["Limit", "Offset", "All", "One", "Create"]
    assert config.fail_fast is True
    assert config.add_comments is True


def test_default_lists_are_not_shared():
    first = GeneratorConfig()
    first.binary_filters.append("like")
    assert GeneratorConfig().binary_filters == DEFAULT_BINARY_FILTERS


def test_custom_overrides_and_unknown_keys():
    config = load_config(custom_config={"package_name": "store", "header": "x"})
    assert config.package_name == "store"
    assert config.custom == {"header": "x"}


def test_file_then_custom(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"package_name": "fromfile", "fail_fast": False}))

    config = load_config(custom_config={"package_name": "cli"}, config_file=path)
    assert config.package_name == "cli"
    assert config.fail_fast is False


def test_list_type_checked():
    with pytest.raises(ConfigError, match="binary_filters must be a list"):
        load_config(custom_config={"binary_filters": "eq"})


class TestConfigFile:
    def test_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config_file(tmp_path / "missing.json")

    def test_wrong_suffix(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("package_name: x")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config_file(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config_file(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config_file(path)

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "saved.json"
        original = GeneratorConfig(
            package_name="store", binary_filters=["eq"], custom={"header": "x"}
        )
        get_config_manager().save_config(original, path)

        saved = json.loads(path.read_text())
        assert saved["header"] == "x"
        assert "custom" not in saved
        assert load_config(config_file=path) == original


def test_manager_defaults_rank_below_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"package_name": "fromfile"}))

    manager = ConfigManager(defaults={"package_name": "base", "fail_fast": False})
    config = manager.get_config(config_file=path)
    assert config.package_name == "fromfile"
    assert config.fail_fast is False


def test_example_config_builds_generator(example_config_path):
    generator = GoQuerySetGenerator(load_config(config_file=example_config_path))
    assert generator.config.struct_methods == ["Limit", "All", "One", "Create"]
    assert generator.config.fail_fast is False


# ---------------------------------------------------------------------------
# Go configuration
# ---------------------------------------------------------------------------


class TestGoConfig:
    def test_from_generic_config(self):
        config = GoConfig.from_config(GeneratorConfig(package_name="store"))
        assert isinstance(config, GoConfig)
        assert config.package_name == "store"

    def test_from_go_config_is_identity(self):
        config = GoConfig()
        assert GoConfig.from_config(config) is config

    @pytest.mark.parametrize("name", ["func", "", "my-models"])
    def test_invalid_package(self, name):
        with pytest.raises(ConfigError, match="Invalid Go package name"):
            GoConfig(package_name=name)

    def test_unknown_struct_method(self):
        with pytest.raises(ConfigError, match="Unknown struct methods: Delete"):
            GoConfig(struct_methods=["Limit", "Delete"])

    def test_empty_gorm_import(self):
        with pytest.raises(ConfigError, match="gorm_import"):
            GoConfig(gorm_import="")


def test_format_go_import():
    assert format_go_import("github.com/jinzhu/gorm") == '"github.com/jinzhu/gorm"'
    assert format_go_import('"fmt"') == '"fmt"'


def test_split_go_imports():
    groups = split_go_imports(['"time"', '"github.com/jinzhu/gorm"', '"fmt"', '"fmt"'])
    assert groups == {
        "std": ['"fmt"', '"time"'],
        "external": ['"github.com/jinzhu/gorm"'],
    }
