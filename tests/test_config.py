import pytest

from config import GameConfig, GameConfigError


def test_defaults_to_sixty_seconds():
    assert GameConfig.coerce(None).duration_seconds == 60
    assert GameConfig.coerce({}).duration_seconds == 60


def test_rejects_unsupported_config_types():
    with pytest.raises(GameConfigError):
        GameConfig.coerce(30)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        GameConfig(duration_seconds=0).validate()
