import logging
import math
from typing import Any, Iterable, NamedTuple, Sequence

from . import geometric_primitives as gp


logger = logging.getLogger(__name__)


class VectorPair(NamedTuple):
    first: Any
    second: Any


class AngleResult(NamedTuple):
    first: gp.Vector2
    second: gp.Vector2
    angle: float


def pairwise_elts(elements: Iterable) -> list[VectorPair]:
    """
    Returns all unique pairs (i.e. [a, b] == [b, a]) of elements, excluding
    pairs of an element with itself. Pairs are ordered by (i, j) with i < j,
    where i and j are positions in the input.
    """
    items = list(elements)
    pairs = []
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            pairs.append(VectorPair(items[i], items[j]))
    return pairs


def _angle_key(pair: VectorPair):
    theta = gp.angle_between(pair.first, pair.second)
    # nan is not comparable, keep such pairs after all real angles
    if math.isnan(theta):
        return (1, 0.0)
    return (0, theta)


def theta_sort(vectors: Sequence[gp.Vector2]) -> list[VectorPair]:
    """
    Returns the pairs of vectors ordered by the angle between them, ascending.
    Sort is stable: pairs with equal angle keep the enumeration order.
    """
    pairs = pairwise_elts(vectors)
    logger.debug('sorting %d pairs of %d vectors', len(pairs), len(vectors))
    return sorted(pairs, key=_angle_key)


def sorted_angle_pairs(vectors: Sequence[gp.Vector2]) -> list[AngleResult]:
    for i, v in enumerate(vectors):
        if v.is_zero():
            logger.warning('vector %d is zero length, its angles are undefined', i)

    return [
        AngleResult(first, second, gp.angle_between(first, second))
        for first, second in theta_sort(vectors)
    ]

