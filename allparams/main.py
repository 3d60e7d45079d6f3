import argparse
import logging
import sys
from pathlib import Path

from . import config
from .catalog import load_catalog
from .exceptions import FileOpenError, LibraryLoadError
from .library import MediaInfoLibrary
from .printer import StreamPrinter


def setup_logging(verbose: bool):
    """Sets up logging to stderr; stdout carries the parameter listing."""
    log_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="allparams",
        description="Print every MediaInfo parameter that has a value, for all streams of a media file."
    )

    # Checked by hand so a wrong count exits with status 1, not argparse's 2
    p.add_argument("files", nargs="*", type=Path, help="Media file to inspect (exactly one)")

    p.add_argument("--library-file", default=None, help="Path to the MediaInfo shared library")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)


def fail(message: str):
    print(message, file=sys.stderr)
    sys.exit(1)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)

    if len(args.files) != 1:
        fail(config.USAGE_ERROR)
    path = args.files[0]

    try:
        with MediaInfoLibrary(path, library_file=args.library_file) as mi:
            catalog = load_catalog(mi)
            StreamPrinter(mi, catalog).print_all()
    except LibraryLoadError as e:
        fail(f"{config.LIBRARY_ERROR} {e}")
    except FileOpenError as e:
        fail(f"{config.OPEN_ERROR} {e}")
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)


if __name__ == "__main__":
    main()
