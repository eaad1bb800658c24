import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2d vector. Equality is exact field-wise comparison.
    """
    x: float
    y: float

    def norm(self) -> float:
        """
        Returns euclidean 2-norm of the vector
        """
        return norm(self)

    def dot(self, other) -> float:
        return dot(self, other)

    def get_angle_between(self, other) -> float:
        """
        Returns angle between self and other in radians, [0, pi]
        """
        return angle_between(self, other)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self):
        return format_vector(self)


def dot(a: Vector2, b: Vector2) -> float:
    return a.x * b.x + a.y * b.y


def norm(v: Vector2) -> float:
    return math.sqrt(dot(v, v))


def angle_between(a: Vector2, b: Vector2) -> float:
    """
    Returns angle theta between a and b in radians.
    Result is nan if one of the vectors has zero length.
    """
    norms = norm(a) * norm(b)
    if norms == 0:
        return math.nan

    cos_theta = dot(a, b) / norms
    if math.isnan(cos_theta):
        return math.nan

    # rounding can push parallel vectors slightly outside of acos domain
    return math.acos(max(-1.0, min(1.0, cos_theta)))


def format_vector(v: Vector2) -> str:
    return f'[{v.x:g}, {v.y:g}]'
