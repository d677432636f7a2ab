from enum import Enum
from typing import Tuple

from .named_hue import NamedHue


class StandardHue(str, Enum):
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    LIME = "lime"
    GREEN = "green"
    TEAL = "teal"
    CYAN = "cyan"
    AZURE = "azure"
    BLUE = "blue"
    INDIGO = "indigo"
    PURPLE = "purple"
    PINK = "pink"


# Twelve hues at 30 degree steps starting from red
STANDARD_HUES: Tuple[NamedHue, ...] = (
    NamedHue(StandardHue.RED.value,    0 / 360.0,   primary=True),
    NamedHue(StandardHue.ORANGE.value, 30 / 360.0,  primary=True),
    NamedHue(StandardHue.YELLOW.value, 60 / 360.0,  primary=True),
    NamedHue(StandardHue.LIME.value,   90 / 360.0,  primary=False),
    NamedHue(StandardHue.GREEN.value,  120 / 360.0, primary=True),
    NamedHue(StandardHue.TEAL.value,   150 / 360.0, primary=False),
    NamedHue(StandardHue.CYAN.value,   180 / 360.0, primary=False),
    NamedHue(StandardHue.AZURE.value,  210 / 360.0, primary=False),
    NamedHue(StandardHue.BLUE.value,   240 / 360.0, primary=True),
    NamedHue(StandardHue.INDIGO.value, 270 / 360.0, primary=False),
    NamedHue(StandardHue.PURPLE.value, 300 / 360.0, primary=True),
    NamedHue(StandardHue.PINK.value,   330 / 360.0, primary=True),
)
