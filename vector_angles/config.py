"""Runtime settings for the vector angles command line tool."""

import argparse
import os
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional, Sequence


DEFAULT_INPUT_FILE = 'test.txt'
DEFAULT_PRECISION = 6
DEFAULT_LOG_LEVEL = 'WARNING'

MAX_PRECISION = 17
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

ENV_VARS = {
    'input_file': 'VECTOR_ANGLES_INPUT',
    'precision': 'VECTOR_ANGLES_PRECISION',
    'plot_file': 'VECTOR_ANGLES_PLOT',
    'log_level': 'VECTOR_ANGLES_LOG_LEVEL',
}


@dataclass(frozen=True)
class Settings:
    input_file: str = DEFAULT_INPUT_FILE
    precision: int = DEFAULT_PRECISION
    plot_file: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    def with_updates(self, overrides: Mapping[str, Any]) -> 'Settings':
        merged = asdict(self)
        merged.update(overrides)
        return Settings(**_validate(merged))


def _validate(values: dict) -> dict:
    precision = values['precision']
    if isinstance(precision, str):
        try:
            precision = int(precision)
        except ValueError as e:
            raise ValueError(f'precision must be an integer, got {precision!r}') from e
    if not 0 <= precision <= MAX_PRECISION:
        raise ValueError(f'precision must be between 0 and {MAX_PRECISION}, got {precision}')
    values['precision'] = precision

    level = str(values['log_level']).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f'log_level must be one of {list(LOG_LEVELS)}, got {values["log_level"]!r}')
    values['log_level'] = level

    if not values['input_file']:
        raise ValueError('input_file must not be empty')
    return values


def _collect_env_overrides(env: Mapping[str, str]) -> dict:
    overrides = {}
    for field, env_name in ENV_VARS.items():
        raw = env.get(env_name)
        if raw:
            overrides[field] = raw
    return overrides


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='vector-angles',
        description='Prints every pair of 2d vectors from a file, ordered by the angle between them',
    )
    parser.add_argument(
        'input_file',
        nargs='?',
        help=f'file with whitespace separated coordinates (default: {DEFAULT_INPUT_FILE})',
    )
    parser.add_argument('--precision', type=int, help='digits after the decimal point of the angle')
    parser.add_argument('--plot', dest='plot_file', help='save a plot of the vectors to this file')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS)
    return parser


def load_settings(
        args: Optional[Sequence[str]] = None,
        env: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Builds settings from defaults, then environment, then command line arguments.
    """
    if env is None:
        env = os.environ

    parsed = build_arg_parser().parse_args(args)
    overrides = _collect_env_overrides(env)
    for field in ENV_VARS:
        value = getattr(parsed, field)
        if value is not None:
            overrides[field] = value

    return Settings().with_updates(overrides)
