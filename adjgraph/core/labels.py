from enum import Enum


class EdgeState(Enum):
    """Sentinel edge states (ABSENT, NO_LABEL).

    Attributes:
        ABSENT: No edge exists between the two vertices
        NO_LABEL: The edge exists but carries no explicit label

    Any other value stored on an edge, ``None`` included, is an explicit label.
    """

    ABSENT = "absent"
    NO_LABEL = "no_label"

    def __repr__(self):
        return self.name


ABSENT = EdgeState.ABSENT
NO_LABEL = EdgeState.NO_LABEL


def is_edge(label) -> bool:
    """True unless ``label`` is the ABSENT sentinel."""
    return label is not ABSENT
