"""Command line decoder for files of NMEA sentences.

Usage::

    gpsnmea capture.nmea
    gpsnmea capture.nmea --json out/ --log-level debug

Each accepted sentence is printed in a one-line text form, or written to
``<OUT_DIR>/<index>_<type>.json`` when ``--json`` is given. Rejected lines
are logged as warnings and skipped.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from gpsnmea.gnss import decode_lines, read_lines
from gpsnmea.output import format_sample, save_to_json

__all__ = ["configure_logging", "main", "parse_args"]

logger = logging.getLogger(__name__)

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def configure_logging(level_name: str, log_file: Path | None = None) -> None:
    """Configure root logging on stderr, plus a file when ``log_file`` is set.

    Raises:
        ValueError: If ``level_name`` is not one of ``LOG_LEVELS``.
    """
    level = LOG_LEVELS.get(level_name.lower())
    if level is None:
        valid = ", ".join(sorted(LOG_LEVELS))
        raise ValueError(f"Invalid log level '{level_name}'. Choose from: {valid}")

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.setLevel(level)
    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Decode NMEA-0183 GPS sentences")
    parser.add_argument("input", type=Path, help="Text file with one sentence per line")
    parser.add_argument(
        "--json",
        dest="json_dir",
        type=Path,
        help="Write one JSON file per decoded sentence into this directory",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=sorted(LOG_LEVELS),
        help="Logging level (default: warning)",
    )
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    if args.json_dir is not None:
        try:
            args.json_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Cannot create output directory %s: %s", args.json_dir, e)
            return 1

    try:
        lines = list(read_lines(args.input))
    except OSError as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return 1

    count = 0
    try:
        for index, sample in enumerate(decode_lines(lines)):
            count += 1
            if args.json_dir is None:
                print(format_sample(sample))
            else:
                save_to_json(sample, args.json_dir / f"{index:06d}_{sample.type}.json")
    except OSError as e:
        logger.error("Cannot write output: %s", e)
        return 1

    logger.info("Decoded %d sentences from %s", count, args.input)
    return 0


if __name__ == "__main__":
    sys.exit(main())
