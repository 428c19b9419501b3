# Heap depth bounds. Capacity is 2**levels - 1, so depth stays small.
MIN_LEVELS = 1
MAX_LEVELS = 5
DEFAULT_LEVELS = 3

# Playback pacing (milliseconds).
DEFAULT_SPEED_MS = 800
# Heartbeat interval used while paused; ticks still fire but mutate nothing.
PAUSED_INTERVAL_MS = 50

# Item source.
ITEM_COUNT = 16
MIN_ITEM_VALUE = 1
MAX_ITEM_VALUE = 99
# current starts at -LEAD_IN_TICKS so the first items slide in before insertion.
LEAD_IN_TICKS = 2

# Layout geometry (logical units, y grows upward like arcade).
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 600
TREE_TOP = 520
LEVEL_GAP = 80
ITEM_ROW_Y = 70
ITEM_SPACING = 56
NODE_RADIUS = 22

HEAP_NODE_COLOR = (70, 90, 180)
ITEM_COLOR = (200, 130, 60)
EDGE_COLOR = (150, 150, 180)
TEXT_COLOR = (255, 255, 255)
