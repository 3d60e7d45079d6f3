import pytest
from allparams.models import StreamKind

CATALOG_TEXT = """General
Count                            : Count of objects available in this stream
Format                           : Format used
Inform                           : Last **Inform** call
Duration                         : Play time of the stream in ms

Video
Width                            : Width (aperture size if present) in pixel
Format                           : Format used
Height                           : Height in pixel

Audio
Channels                         : Number of channels
Format                           : Format used

Text
Language                         : Language (2-letter ISO 639-1 if exists)

Other
Type                             : Type

Image
Width                            : Width (aperture size if present) in pixel

Menu
Chapters_Pos_Begin               : Used by third-party developers to know about the beginning of the chapters list
"""


class FakeLibrary:
    """Stands in for an opened MediaInfoLibrary."""

    def __init__(self, values=None, counts=None, catalog_text=CATALOG_TEXT):
        # Map: (StreamKind, index) -> {key: value}
        self.values = values or {}
        self.counts = counts or {}
        self.catalog_text = catalog_text
        self.queries = []

    def parameter_catalog_text(self):
        return self.catalog_text

    def count(self, kind):
        return self.counts.get(kind, 0)

    def get(self, kind, index, key):
        self.queries.append((kind, index, key))
        return self.values.get((kind, index), {}).get(key, "")


@pytest.fixture
def catalog_text():
    return CATALOG_TEXT


@pytest.fixture
def fake_library():
    """One General stream and two Audio streams with a few values set."""
    return FakeLibrary(
        counts={StreamKind.GENERAL: 1, StreamKind.AUDIO: 2},
        values={
            (StreamKind.GENERAL, 0): {"Format": "MPEG-4", "Duration": "5000", "Count": "331"},
            (StreamKind.AUDIO, 0): {"Format": "AAC", "Channels": "2"},
            (StreamKind.AUDIO, 1): {"Format": "AC-3"},
        },
    )
