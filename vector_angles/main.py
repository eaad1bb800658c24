import logging
import sys
from typing import Optional, Sequence

from . import config
from . import pairing
from . import plotting
from . import report
from .vector_reader import MalformedInputError, VectorReader


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'


def _configure_logging(level: str):
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[Sequence[str]] = None, stdout=None) -> int:
    if stdout is None:
        stdout = sys.stdout

    try:
        settings = config.load_settings(argv)
    except ValueError as e:
        print(f'vector-angles: {e}', file=sys.stderr)
        return 2

    _configure_logging(settings.log_level)

    try:
        reader = VectorReader(settings.input_file)
    except MalformedInputError as e:
        logger.error('malformed input in %s: %s', settings.input_file, e)
        print(f'vector-angles: {settings.input_file}: {e}', file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        logger.error('cannot read %s: %s', settings.input_file, e)
        print(f'vector-angles: no input file {settings.input_file}', file=sys.stderr)
        return 1
    except OSError as e:
        logger.error('cannot read %s: %s', settings.input_file, e)
        print(f'vector-angles: {settings.input_file}: {e.strerror}', file=sys.stderr)
        return 1

    results = pairing.sorted_angle_pairs(reader.vectors)
    report.write_report(results, stdout, settings.precision)

    if settings.plot_file:
        try:
            plotting.save_plot(reader.vectors, results, settings.plot_file)
        except (ValueError, OSError) as e:
            logger.error('cannot save plot to %s: %s', settings.plot_file, e)
            print(f'vector-angles: cannot save plot {settings.plot_file}: {e}', file=sys.stderr)
            return 1

    return 0
