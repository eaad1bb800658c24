from .. import config

import pytest


def test_defaults():
    settings = config.load_settings(args=[], env={})
    assert settings == config.Settings()
    assert settings.input_file == 'test.txt'
    assert settings.precision == 6
    assert settings.plot_file is None
    assert settings.log_level == 'WARNING'


def test_env_overrides_take_effect():
    env = {
        'VECTOR_ANGLES_INPUT': 'vectors.txt',
        'VECTOR_ANGLES_PRECISION': '3',
        'VECTOR_ANGLES_PLOT': 'vectors.png',
        'VECTOR_ANGLES_LOG_LEVEL': 'debug',
    }
    settings = config.load_settings(args=[], env=env)
    assert settings.input_file == 'vectors.txt'
    assert settings.precision == 3
    assert settings.plot_file == 'vectors.png'
    assert settings.log_level == 'DEBUG'


def test_cli_overrides_env():
    env = {'VECTOR_ANGLES_INPUT': 'vectors.txt', 'VECTOR_ANGLES_PRECISION': '3'}
    settings = config.load_settings(
        args=['other.txt', '--precision', '9', '--log-level', 'info', '--plot', 'out.png'],
        env=env,
    )
    assert settings.input_file == 'other.txt'
    assert settings.precision == 9
    assert settings.log_level == 'INFO'
    assert settings.plot_file == 'out.png'


@pytest.mark.parametrize(
    'env, match',
    [
        ({'VECTOR_ANGLES_PRECISION': 'six'}, 'precision must be an integer'),
        ({'VECTOR_ANGLES_PRECISION': '18'}, 'precision must be between'),
        ({'VECTOR_ANGLES_LOG_LEVEL': 'loud'}, 'log_level must be one of'),
    ]
)
def test_invalid_env_values_raise(env, match):
    with pytest.raises(ValueError, match=match):
        config.load_settings(args=[], env=env)


def test_invalid_cli_precision_raises():
    with pytest.raises(ValueError, match='precision must be between'):
        config.load_settings(args=['--precision', '-1'], env={})


def test_unknown_cli_log_level_exits():
    with pytest.raises(SystemExit):
        config.load_settings(args=['--log-level', 'loud'], env={})
