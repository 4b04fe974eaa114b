import json

import pytest

from scramblematch.exceptions import FileLoadException, InvalidConfigurationException
from scramblematch.models.config import MatcherConfig


def test_defaults():
    config = MatcherConfig()
    assert config.results_format_version == "WCA Results 0.3"
    assert config.output_indent == 2
    assert config.results_file_name("Test Open") == "Results for Test Open.json"


def test_round_trip_through_dict():
    config = MatcherConfig(scramble_program="Matcher", output_indent=4)
    assert MatcherConfig.from_dict(config.to_dict()) == config


def test_partial_dict_uses_defaults():
    config = MatcherConfig.from_dict({"output_indent": 0})
    assert config.output_indent == 0
    assert config.scramble_program == "Scramble Match"


def test_invalid_values():
    with pytest.raises(InvalidConfigurationException):
        MatcherConfig(output_indent=-1)
    with pytest.raises(InvalidConfigurationException):
        MatcherConfig(results_file_template="results.json")
    with pytest.raises(InvalidConfigurationException):
        MatcherConfig.from_dict({"colour": "blue"})


def test_load(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scramble_program": "Custom"}), encoding="utf-8")
    assert MatcherConfig.load(path).scramble_program == "Custom"


def test_load_errors(tmp_path):
    with pytest.raises(FileLoadException):
        MatcherConfig.load(tmp_path / "missing.json")

    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        MatcherConfig.load(path)
