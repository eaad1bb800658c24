import io
import logging
import re
from typing import Iterable, Iterator, TextIO

import numpy as np

from . import geometric_primitives as gp


logger = logging.getLogger(__name__)

# plain decimal literals only, no digit separators, nan or inf
NUMBER_RE = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)


class MalformedInputError(ValueError):
    """
    Raised when the input cannot be grouped into 2d vectors.
    """
    pass


def read_tokens(stream: TextIO) -> Iterator[float]:
    """
    Lazily yields every whitespace-separated number of the text stream.
    """
    line_number = 0
    try:
        for line_number, line in enumerate(stream, start=1):
            for token in line.split():
                yield _parse_token(token, line_number)
    except UnicodeDecodeError as e:
        raise MalformedInputError(
            f'undecodable text after line {line_number}: {e.reason}'
        ) from e


def _parse_token(token: str, line_number: int) -> float:
    if NUMBER_RE.fullmatch(token) is None:
        raise MalformedInputError(f'invalid numeric token {token!r} on line {line_number}')
    return float(token)


def ingest(tokens: Iterable[float]) -> list[gp.Vector2]:
    """
    Groups tokens pairwise into vectors, preserving the order of the tokens.
    Odd number of tokens is an error, no partial result is returned.
    """
    result = []
    it = iter(tokens)
    for x in it:
        try:
            y = next(it)
        except StopIteration:
            raise MalformedInputError('mismatched vector elements') from None
        result.append(gp.Vector2(float(x), float(y)))

    logger.debug('ingested %d vectors', len(result))
    return result


def ingest_text(text: str) -> list[gp.Vector2]:
    return ingest(read_tokens(io.StringIO(text)))


class VectorReader:
    def __init__(self, filename: str):
        with open(filename, encoding='utf-8') as f:
            self.vectors = ingest(read_tokens(f))

        self.filename = filename
        self.coordinates = VectorReader._build_coordinates(self.vectors)
        logger.info('read %d vectors from %s', len(self.vectors), filename)

    @staticmethod
    def _build_coordinates(vectors: list[gp.Vector2]) -> np.ndarray:
        if not vectors:
            return np.empty((0, 2))
        return np.asarray([[v.x, v.y] for v in vectors], dtype=float)
