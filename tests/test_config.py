#!/usr/bin/env python3
"""
Configuration Tests
"""

import io
from pathlib import Path

import pytest

from hunfreq.errors import ConfigurationError
from hunfreq.models import (
    DEFAULT_METHODS,
    IRREGULAR_SPEED,
    MOUSE_SPEED,
    REGULAR_SPEED,
    BusinessConfig,
    ReportConfig,
    TypingMethodSpec,
    TypingSpeed,
)
from hunfreq.report import ReportWriter


EXAMPLE_CONFIG = Path(__file__).resolve().parents[1] / "config.yaml"


def test_example_config_matches_defaults():
    config = ReportConfig.from_yaml(str(EXAMPLE_CONFIG))
    defaults = ReportConfig()

    assert config.methods == defaults.methods
    assert config.speeds == defaults.speeds
    assert config.business == defaults.business
    assert config.book_list == "hlfcBookList.txt"
    assert config.output == "hlfcResult.txt"
    assert config.log_file is None


def test_empty_mapping_gives_defaults():
    config = ReportConfig.from_dict({})
    assert config.methods == list(DEFAULT_METHODS)
    assert config.speeds == [REGULAR_SPEED, IRREGULAR_SPEED, MOUSE_SPEED]
    assert config.letters_per_word == 5


def test_speed_from_wpm_and_accuracy():
    speed = TypingSpeed.from_wpm("s", "label", 60, 0.5)
    assert speed.seconds_per_letter == pytest.approx(0.4)
    assert speed.wpm() == pytest.approx(30.0)


def test_methods_reference_speeds():
    config = ReportConfig.from_dict({
        "speeds": {
            "fast": {"seconds_per_letter": 0.1},
            "slow": {"wpm": 12},
        },
        "methods": [
            {"short_name": "A", "regular_speed": "fast", "irregular_speed": "slow"},
            {"short_name": "B", "regular_speed": 0.2, "irregular_speed": "fast", "irregular_keystrokes": 3},
            {"short_name": "C", "name": "Third", "regular_letters": "abc",
             "regular_speed": "fast", "irregular_speed": 5},
        ],
    })

    a, b, c = config.methods
    assert a.name == "A"
    assert a.regular_speed == pytest.approx(0.1)
    assert a.irregular_speed == pytest.approx(1.0)
    assert b.regular_speed == pytest.approx(0.2)
    assert b.irregular_speed == pytest.approx(0.3)
    assert c.regular_set == {ord("A"), ord("B"), ord("C")}
    assert c.irregular_speed == 5.0


def test_too_few_methods():
    with pytest.raises(ConfigurationError):
        ReportConfig(methods=list(DEFAULT_METHODS[:2]))


def test_unknown_speed():
    with pytest.raises(ConfigurationError):
        ReportConfig.from_dict({
            "methods": [
                {"short_name": m, "regular_speed": "regular", "irregular_speed": "warp"}
                for m in "abc"
            ],
        })


def test_speed_needs_a_value():
    with pytest.raises(ConfigurationError):
        ReportConfig.from_dict({"speeds": {"broken": {"label": "nothing"}}})


def test_method_needs_speeds():
    with pytest.raises(ConfigurationError):
        ReportConfig.from_dict({"methods": [{"short_name": "x"}] * 3})


def test_to_dict_round_trip():
    config = ReportConfig(book_list="b.txt", output="o.txt")
    again = ReportConfig.from_dict(config.to_dict())

    assert again.book_list == "b.txt"
    assert again.output == "o.txt"
    assert again.methods == config.methods
    assert again.business == config.business


# =============================================================================
# Partial and malformed configurations
# =============================================================================

def test_speed_override_reaches_default_methods():
    config = ReportConfig.from_dict({"speeds": {"regular": {"wpm": 100, "accuracy": 1.0}}})
    regular, irregular, mouse = config.speeds

    assert regular.label == "same as familiar keyboard"
    assert regular.seconds_per_letter == pytest.approx(0.12)
    assert irregular == IRREGULAR_SPEED
    assert mouse == MOUSE_SPEED

    method_a, method_b, method_c = config.methods
    assert method_a.regular_speed == regular.seconds_per_letter
    assert method_a.irregular_speed == irregular.seconds_per_letter
    assert method_b.irregular_speed == mouse.seconds_per_letter
    assert method_c.irregular_speed == pytest.approx(2 * regular.seconds_per_letter)

    stream = io.StringIO()
    ReportWriter(config, stream).write_configuration()
    assert stream.getvalue().splitlines()[2] == (
        "  Typing Speed (same as familiar keyboard       :  100.0 [wpm] (0.120000 sec/letter)"
    )


def test_letters_per_word_applies_to_default_speeds():
    config = ReportConfig.from_dict({"letters_per_word": 6})
    assert config.speeds[0].seconds_per_letter == pytest.approx(60 / (50 * 0.95 * 6))
    assert config.methods[0].regular_speed == config.speeds[0].seconds_per_letter


def test_empty_sections_keep_defaults():
    config = ReportConfig.from_dict({"files": None, "business": None, "logging": None, "speeds": None})
    assert config.book_list == "hlfcBookList.txt"
    assert config.business == BusinessConfig()
    assert config.log_level == "INFO"
    assert config.methods == list(DEFAULT_METHODS)


@pytest.mark.parametrize("data", [
    ["not", "a", "mapping"],
    {"files": "hlfcBookList.txt"},
    {"business": [254]},
    {"business": {"days_in_year": "many"}},
    {"letters_per_word": "five"},
    {"letters_per_word": 0},
    {"speeds": ["regular"]},
    {"speeds": {"regular": 50}},
    {"speeds": {"regular": {"wpm": "fast"}}},
    {"speeds": {"regular": {"wpm": 0}}},
    {"methods": {"short_name": "a"}},
    {"methods": ["a", "b", "c"]},
    {"methods": [
        {"short_name": m, "regular_speed": "regular", "irregular_speed": "mouse",
         "irregular_keystrokes": "two"}
        for m in "abc"
    ]},
    {"methods": [
        {"short_name": m, "regular_speed": "regular", "irregular_speed": "mouse", "regular_letters": 123}
        for m in "abc"
    ]},
])
def test_malformed_config(data):
    with pytest.raises(ConfigurationError):
        ReportConfig.from_dict(data)


def test_log_level():
    assert ReportConfig.from_dict({"logging": {"level": "debug"}}).log_level == "debug"
    with pytest.raises(ConfigurationError):
        ReportConfig.from_dict({"logging": {"level": "VERBOSE"}})
    with pytest.raises(ConfigurationError):
        ReportConfig(log_level="VERBOSE")


def test_regular_letters_must_be_cp1250():
    with pytest.raises(ConfigurationError, match="→"):
        TypingMethodSpec("x", "arrows", "ab→", 1.0, 1.0)

    with pytest.raises(ConfigurationError):
        ReportConfig.from_dict({"methods": [
            {"short_name": m, "regular_letters": "ab→", "regular_speed": 1, "irregular_speed": 2}
            for m in "abc"
        ]})


def test_regular_set_is_computed_once():
    method = TypingMethodSpec("x", "x", "őű", 1.0, 1.0)
    assert method.regular_set is method.regular_set
    assert method.regular_set == {0xD5, 0xDB}
