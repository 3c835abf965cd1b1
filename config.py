WINDOW_NAME = "MiniPaint"
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720

# Colors (BGR)
BACKGROUND_COLOR = (59, 235, 255)   # #FFEB3B yellow
PAINT_COLOR = (0, 199, 18)          # #12C700 green

# Pen
STROKE_WIDTH = 12.0   # float, > 0

# Decorative frame, inset from every edge of the viewport
FRAME_INSET = 40

# Drag slop in density-independent units; MOVE_TOLERANCE = slop * density
TOUCH_SLOP_DP = 8
DISPLAY_DENSITY = 1.0

# Host loop
FRAME_DELAY_MS = 16   # ~60 Hz
LOG_LEVEL = "INFO"
