from enum import IntEnum


class Color(IntEnum):
    """Fixed palette identifiers used by the UI. Carries no meaning beyond identity."""
    COLOR_1 = 1
    COLOR_2 = 2
    COLOR_3 = 3
    COLOR_4 = 4
    COLOR_5 = 5
    COLOR_6 = 6
    COLOR_7 = 7
    COLOR_8 = 8
    COLOR_9 = 9
    COLOR_10 = 10


# Maximum number of nodes in a single graph, the root included
MAX_NODES = 10_000

# Longest task name accepted by the sanitizer
MAX_NAME_LENGTH = 100

DEFAULT_COLOR = Color.COLOR_1

ROOT_NAME_PREFIX = "Δ"
