from typing import Iterable, TextIO

from . import geometric_primitives as gp
from .pairing import AngleResult


THETA = 'θ'
DEFAULT_PRECISION = 6


def format_result(result: AngleResult, precision: int = DEFAULT_PRECISION) -> str:
    """
    Renders a single result, e.g. 'θ([1, 4], [1, 5]) = 0.047583'
    """
    first = gp.format_vector(result.first)
    second = gp.format_vector(result.second)
    return f'{THETA}({first}, {second}) = {result.angle:.{precision}f}'


def format_report(
        results: Iterable[AngleResult],
        precision: int = DEFAULT_PRECISION,
) -> list[str]:
    return [format_result(r, precision) for r in results]


def write_report(
        results: Iterable[AngleResult],
        stream: TextIO,
        precision: int = DEFAULT_PRECISION,
):
    for line in format_report(results, precision):
        stream.write(line + '\n')
