"""
Builds the parameter catalog from MediaInfo's 'Info_Parameters' text.

The text is made of blank-line separated sections. The first line of a
section names the category, every following line starts with a parameter
key and describes it:

    General
    Count                            : Count of objects available in this stream
    StreamCount                      : Count of streams of this kind available
    ...

    Video
    ...
"""
import logging
from types import MappingProxyType
from typing import Dict, Optional

from .models import ParameterCatalog, StreamKind


def build_catalog(text: str) -> ParameterCatalog:
    """
    Parses the sectioned parameter list into one mapping per stream kind.

    Descriptions are the full parameter line with whitespace collapsed.
    Sections with an unknown category label are reported and dropped.
    """
    params: Dict[StreamKind, Dict[str, str]] = {kind: {} for kind in StreamKind}

    new_section = True
    current: Optional[Dict[str, str]] = None
    for line in text.splitlines():
        fields = line.split()
        if not fields:
            new_section = True
            continue

        if new_section:
            new_section = False
            kind = StreamKind.from_label(fields[0])
            if kind is None:
                logging.warning(f"Unknown category '{fields[0]}', skipping its parameters.")
                current = None
            else:
                current = params[kind]
            continue

        if current is not None:
            current[fields[0]] = " ".join(fields)

    for kind, entries in params.items():
        logging.debug(f"Catalog: {len(entries)} {kind.label} parameters")

    return MappingProxyType({kind: MappingProxyType(entries) for kind, entries in params.items()})


def load_catalog(library) -> ParameterCatalog:
    """Builds the catalog from the parameter list of an opened MediaInfoLibrary."""
    return build_catalog(library.parameter_catalog_text())
