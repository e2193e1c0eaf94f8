"""CLI entry point: ``lnkinfo FILE``."""

import argparse
import logging
import os
import sys

from .errors import FormatError
from .parser import parse_lnk
from .report import format_lnk

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "LNKINFO_LOG_LEVEL"


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="lnkinfo",
        description="Display the contents of a Windows .lnk file (MS-SHLLINK)",
    )
    parser.add_argument("file", help="LNK file to parse")
    args = parser.parse_args(argv)

    _configure_logging()

    try:
        lnk = parse_lnk(args.file)
    except OSError as exc:
        reason = exc.strerror or exc
        logger.error("cannot read %s: %s", args.file, reason)
        print(f"error: cannot read {args.file}: {reason}", file=sys.stderr)
        sys.exit(1)
    except FormatError as exc:
        logger.error("failed to parse %s: %s", args.file, exc)
        print(f"error: {args.file}: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"FILE: {args.file}")
    print(format_lnk(lnk))


if __name__ == "__main__":
    main()
