"""Fixed configuration for the falling sand simulation.

All values are compiled in; the grid size is not runtime-configurable.
"""

# --- Grid dimensions ---
WIDTH = 427
HEIGHT = 240

# --- Display ---
PIXEL_SCALE = 3  # each grid cell = PIXEL_SCALE x PIXEL_SCALE screen pixels
SCREEN_WIDTH = WIDTH * PIXEL_SCALE
SCREEN_HEIGHT = HEIGHT * PIXEL_SCALE
FPS = 60
WINDOW_TITLE = "sand"

# --- Brush ---
INITIAL_RADIUS = 10

# --- Capture ---
GIF_FRAMES = 300
GIF_FPS = 30
