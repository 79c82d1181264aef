"""Physical constants and display defaults."""

# Gravitational constant in m^3 kg^-1 s^-2
G = 6.674e-11

# Display
WIDTH, HEIGHT = 800, 800
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DEFAULT_BODY_RADIUS_PIXELS = 4
FRAME_DELAY_MS = 25
IMAGES_DIR = "images"
BACKGROUND_IMAGE = "starfield.jpg"

# Audio
SOUNDTRACK_FILE = "audio/2001.mid"

# Text format used by the loader and the result writer
RECORD_FORMAT = "%7.4e %7.4e %7.4e %7.4e %7.4e %s"
RECORD_FIELDS = 6

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
