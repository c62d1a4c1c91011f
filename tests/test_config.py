"""
Tests for mapping options validation and YAML loading.
"""
from argparse import Namespace

import pytest
from pydantic import ValidationError

from convention_mapper.config import MappingOptions, load_options, validate_and_parse_options
from convention_mapper.domain.naming import (
    LowerUnderscoreNamingConvention,
    PascalCaseNamingConvention,
)
from convention_mapper.exceptions import ConfigurationError


def test_defaults():
    options = MappingOptions()

    assert isinstance(options.source_member_naming_convention, LowerUnderscoreNamingConvention)
    assert isinstance(options.destination_member_naming_convention, LowerUnderscoreNamingConvention)
    assert options.source_prefixes == ("get_",)
    assert options.destination_prefixes == ("set_",)


def test_conventions_by_name_and_instance():
    options = MappingOptions(
        source_member_naming_convention="pascal_case",
        destination_member_naming_convention=PascalCaseNamingConvention(),
    )
    assert isinstance(options.source_member_naming_convention, PascalCaseNamingConvention)
    assert isinstance(options.destination_member_naming_convention, PascalCaseNamingConvention)


def test_prefixes_are_stripped_and_tupled():
    options = MappingOptions(source_prefixes=[" Get ", "Fetch"], destination_prefixes="Set")
    assert options.source_prefixes == ("Get", "Fetch")
    assert options.destination_prefixes == ("Set",)


def test_none_prefixes_mean_no_prefixes():
    assert MappingOptions(source_prefixes=None).source_prefixes == ()


def test_options_are_frozen():
    options = MappingOptions()
    with pytest.raises(ValidationError):
        options.source_prefixes = ("fetch_",)


@pytest.mark.parametrize(
    "raw_options",
    [
        {"source_prefixes": ["Get", ""]},
        {"destination_prefixes": [1]},
        {"source_prefixes": 5},
        {"source_member_naming_convention": "kebab_case"},
        {"destination_member_naming_convention": 3},
    ],
)
def test_invalid_options_raise_configuration_error(raw_options):
    with pytest.raises(ConfigurationError) as exc_info:
        validate_and_parse_options(raw_options)
    assert exc_info.value.error_code == "CONFIG_ERROR"
    assert exc_info.value.context


def test_error_context_names_location():
    with pytest.raises(ConfigurationError) as exc_info:
        validate_and_parse_options({"source_prefixes": ["Get", "  "]}, config_file="mapping.yaml")
    context = exc_info.value.context
    assert context["config_file"] == "mapping.yaml"
    assert any("source_prefixes" in key for key in context)


def test_load_options_from_yaml(tmp_path):
    config_file = tmp_path / "mapping.yaml"
    config_file.write_text(
        "source_member_naming_convention: pascal_case\n"
        "destination_member_naming_convention: pascal_case\n"
        "source_prefixes: [Get]\n"
        "destination_prefixes: []\n"
        "unknown_key: ignored\n",
        encoding="utf-8",
    )

    options = load_options(str(config_file))

    assert isinstance(options.source_member_naming_convention, PascalCaseNamingConvention)
    assert options.source_prefixes == ("Get",)
    assert options.destination_prefixes == ()


def test_cli_arguments_override_file(tmp_path):
    config_file = tmp_path / "mapping.yaml"
    config_file.write_text("source_prefixes: [Get]\n", encoding="utf-8")
    cli_args = Namespace(source_prefixes=["fetch_"], destination_prefixes=None, verbose=True)

    options = load_options(str(config_file), cli_args)

    assert options.source_prefixes == ("fetch_",)
    assert options.destination_prefixes == ("set_",)


def test_missing_file_falls_back_to_defaults(tmp_path, caplog):
    options = load_options(str(tmp_path / "missing.yaml"))

    assert options == MappingOptions()
    assert "Config file not found" in caplog.text


def test_non_mapping_yaml_is_ignored(tmp_path, caplog):
    config_file = tmp_path / "mapping.yaml"
    config_file.write_text("- get_\n- set_\n", encoding="utf-8")

    assert load_options(str(config_file)) == MappingOptions()
    assert "not a dictionary" in caplog.text


def test_invalid_yaml_raises_configuration_error(tmp_path):
    config_file = tmp_path / "mapping.yaml"
    config_file.write_text("source_prefixes: [Get\n", encoding="utf-8")

    with pytest.raises(ConfigurationError) as exc_info:
        load_options(str(config_file))
    assert exc_info.value.context["config_file"] == str(config_file)
