import json

import pytest

from genbuilder.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


def test_defaults():
    config = load_config()
    assert config.output_dir == "."
    assert config.package_name is None
    assert config.run_formatter is True
    assert config.formatter_command == "goimports"
    assert config.add_comments is True
    assert config.custom == {}


def test_file_then_overrides(tmp_path):
    path = tmp_path / "genbuilder.json"
    path.write_text(
        json.dumps(
            {
                "output_dir": "out",
                "package_name": "fromfile",
                "add_comments": False,
                "imports": {"uuid": "github.com/google/uuid"},
            }
        ),
        encoding="utf-8",
    )

    config = load_config(
        custom_config={"package_name": "fromcli", "output_dir": None},
        config_file=path,
    )

    assert config.package_name == "fromcli"
    assert config.output_dir == "out"
    assert config.add_comments is False
    assert config.custom == {"imports": {"uuid": "github.com/google/uuid"}}


def test_overrides_do_not_leak_between_loads():
    load_config(custom_config={"custom": {"imports": {"a": "b"}}})
    assert load_config().custom == {}


@pytest.mark.parametrize(
    "name, content",
    [
        ("config.yaml", "{}"),
        ("config.json", "{not json"),
        ("config.json", "[1, 2]"),
    ],
)
def test_bad_config_files(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file=path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(config_file=tmp_path / "nope.json")


def test_resolve_package_name(tmp_path):
    assert GeneratorConfig(output_dir=str(tmp_path / "models")).resolve_package_name() == "models"
    assert GeneratorConfig(package_name="explicit").resolve_package_name() == "explicit"



def test_validate_config_warnings(tmp_path):
    blocker = tmp_path / "file.txt"
    blocker.write_text("", encoding="utf-8")
    config = GeneratorConfig(
        output_dir=str(blocker), formatter_timeout=0, formatter_command=""
    )

    warnings = ConfigManager().validate_config(config)
    assert len(warnings) == 3
