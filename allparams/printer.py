import logging
import sys
from typing import List, Optional, TextIO, Tuple

from . import config
from .exceptions import InformFormatError
from .models import ParameterCatalog, StreamKind


def parse_inform(value: str) -> List[Tuple[str, str]]:
    """
    Splits the 'Inform' value into (key, value) pairs, in input order.

    Each line is split at its first colon, so values may contain colons
    themselves (e.g. "Duration : 00:01:02").

    Raises:
        InformFormatError: a line has no colon at all.
    """
    pairs = []
    for line in value.splitlines():
        key, sep, val = line.partition(":")
        if not sep:
            raise InformFormatError(line)
        pairs.append((key.strip(), val.strip()))
    return pairs


def format_inform(value: str) -> List[str]:
    """Output lines for the 'Inform' value: a label line, then one indented line per pair."""
    lines = [f"\t{config.INFORM_PARAM:<{config.LABEL_WIDTH}}:"]
    for key, val in parse_inform(value):
        lines.append(f"\t\t{key:<{config.LABEL_WIDTH}}: {val}")
    return lines


class StreamPrinter:
    """
    Prints every non-empty parameter of every stream instance.

    Kinds come in StreamKind declaration order, instances in ascending
    index order and parameters sorted by key.
    """

    def __init__(self, library, catalog: ParameterCatalog, out: Optional[TextIO] = None):
        self.library = library
        self.catalog = catalog
        self.out = out if out is not None else sys.stdout

    def print_all(self) -> int:
        """Prints all stream instances. Returns the number of blocks printed."""
        printed = 0
        for kind in StreamKind:
            printed += self.print_kind(kind)
        return printed

    def print_kind(self, kind: StreamKind) -> int:
        count = self.library.count(kind)
        logging.debug(f"{count} {kind.label} stream(s)")
        for index in range(count):
            self.print_stream(kind, index)
        return count

    def print_stream(self, kind: StreamKind, index: int):
        header = config.HEADER_FORMAT.format(label=kind.label, number=index + 1)
        self._write(header)

        params = self.catalog.get(kind, {})
        for key in sorted(params):
            val = self.library.get(kind, index, key)
            if not val:
                continue
            if key == config.INFORM_PARAM:
                self._print_inform(header, val)
            else:
                self._write(f"\t{params[key]:<{config.LABEL_WIDTH}}: {val}")

    def _print_inform(self, header: str, val: str):
        try:
            lines = format_inform(val)
        except InformFormatError as e:
            logging.warning(f"{header} {e}; skipping it.")
            return
        for line in lines:
            self._write(line)

    def _write(self, line: str):
        print(line, file=self.out)
