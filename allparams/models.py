from enum import Enum
from typing import Mapping, Optional


class StreamKind(Enum):
    """
    The seven MediaInfo stream categories.

    Values are MediaInfo's numeric stream kinds. Declaration order is the
    order streams are printed in.
    """
    GENERAL = 0
    VIDEO = 1
    AUDIO = 2
    TEXT = 3
    OTHER = 4
    IMAGE = 5
    MENU = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> Optional["StreamKind"]:
        for kind in cls:
            if kind.label == label:
                return kind
        return None


# Map: StreamKind -> (parameter key -> full description line)
ParameterCatalog = Mapping[StreamKind, Mapping[str, str]]
