"""Default configuration for the dragonsim command line."""

from dragonsim.curve import Color
from dragonsim.pen import Speed
from dragonsim.unit import Degree

# Phrase mode
DEFAULT_PHRASE = "A day in the life of a software engineer"

# Angle mode
DEFAULT_ANGLE = Degree(90.0)

# Dragon curve
DRAGON_ORDER = 11
DRAGON_OUTER_TURN = Degree(-90.0)
DRAGON_START_COLOR = Color(32.0, 160.0, 255.0)
DRAGON_END_COLOR = Color(255.0, 220.0, 64.0)
DRAGON_STEP = 6.0  # canvas units per leaf segment

# Window
BACKGROUND_COLOR = "#112244"
WINDOW_TITLE = "Ooh, a dragon!"
FULLSCREEN = True
DRAWING_SPEED = Speed.FASTER

# Rendering backends selectable from the CLI
BACKENDS = ("screen", "plot")
DEFAULT_BACKEND = "screen"
