import logging

# Screen settings
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FPS = 60
WINDOW_TITLE = "ColorDrawer Demo"
# Background fill applied before each scene render
CLEAR_COLOR = (20, 20, 28)

# Drawer defaults
# Transparency stored on a fresh drawer (1.0 = fully opaque)
DEFAULT_TRANSPARENCY = 1.0
# Colour a sprite is multiplied by when no tint has been applied
DEFAULT_SPRITE_COLOR = (255, 255, 255, 255)
# Size in pixels of the generated solid texture backing untextured drawers
SOLID_TEXTURE_SIZE = (1, 1)
# Name of the layer created for objects when none is given
DEFAULT_LAYER_NAME = "default"

# Asset settings
# Directory that relative texture paths are resolved against
ASSETS_DIR = "assets"

# Demo settings
# Number of tinted quads spawned by the demo
DEMO_QUAD_COUNT = 6
# Edge length of each demo quad (pixels)
DEMO_QUAD_SIZE = 48
# Movement speed of demo quads (pixels per second)
DEMO_QUAD_SPEED = 140.0
# Rotation speed of demo quads (degrees per second)
DEMO_SPIN_SPEED = 90.0
DEMO_TINTS = [
    (230, 70, 70),
    (70, 200, 90),
    (70, 120, 230),
    (240, 200, 60),
    (200, 90, 220),
    (60, 210, 210),
]

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
