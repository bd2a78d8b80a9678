import pytest

from config.config import CONVERTER_CONFIG, EVALUATOR_CONFIG, validate_config


def test_validate_config():
    assert validate_config()


def test_defaults():
    assert CONVERTER_CONFIG['split_char'] == " "
    assert CONVERTER_CONFIG['strict'] is True
    assert EVALUATOR_CONFIG['unknown_operator_result'] == -1.0


def test_validate_config_accepts_right_associative_power(monkeypatch):
    monkeypatch.setitem(CONVERTER_CONFIG, 'right_associative_power', True)
    assert validate_config()


def test_validate_config_rejects_non_bool_flag(monkeypatch):
    monkeypatch.setitem(CONVERTER_CONFIG, 'right_associative_power', "yes")
    with pytest.raises(AssertionError):
        validate_config()
