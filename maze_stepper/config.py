# config.py

# -------------------------------------------------------------------------
# GRID
# -------------------------------------------------------------------------
COLUMNS = 40
ROWS = 30

# Hex boards are trimmed to a rhombus, so they use fewer rows.
HEX_COLUMNS = 40
HEX_ROWS = 19

# Upper bound for "parallel" seed counts (backtrack and hex backtrack).
MAX_SEEDS = 6

# -------------------------------------------------------------------------
# GEOMETRY (pixels)
# -------------------------------------------------------------------------
CELL_WIDTH = 20.0
LINE_WIDTH = 4.0
OFFSET = 2.0

# -------------------------------------------------------------------------
# TIMING
# -------------------------------------------------------------------------
FPS = 60
UPDATES_PER_SECOND = 60.0

# -------------------------------------------------------------------------
# COLOURS
# -------------------------------------------------------------------------
BG_COLOR = (245, 245, 240)
WALL_COLOR = (136, 0, 68)
PATH_COLOR = (255, 215, 0)
TEXT_COLOR = (20, 20, 20)

# RGBA overlays
EMPTY_COLOR = (0, 0, 0, 51)
FIELD_COLOR = (0x4D, 0xAF, 0x4A, 128)

COLORS = [
    (0xB2, 0x18, 0x2B),
    (0x37, 0x7E, 0xB8),
    (0x4D, 0xAF, 0x4A),
    (0x98, 0x4E, 0xA3),
    (0xFF, 0x7F, 0x00),
    (0xA6, 0x56, 0x28),
    (0xF7, 0x81, 0xBF),
    (0x99, 0x33, 0x00),
    (0x33, 0x33, 0x00),
    (0x00, 0x33, 0x00),
    (0x00, 0x33, 0x66),
    (0x00, 0x00, 0x80),
    (0x33, 0x33, 0x99),
    (0x33, 0x33, 0x33),
    (0x80, 0x00, 0x00),
    (0xFF, 0x66, 0x00),
    (0x80, 0x80, 0x00),
    (0x00, 0x80, 0x00),
    (0x00, 0x80, 0x80),
    (0x00, 0x00, 0xFF),
    (0x66, 0x66, 0x99),
    (0x80, 0x80, 0x80),
    (0xFF, 0x00, 0x00),
    (0xFF, 0x99, 0x00),
    (0x99, 0xCC, 0x00),
    (0x33, 0x99, 0x66),
    (0x33, 0xCC, 0xCC),
    (0x33, 0x66, 0xFF),
    (0x80, 0x00, 0x80),
    (0x96, 0x96, 0x96),
]

# Penrose kite/dart (or thick/thin rhombus) fills
PENROSE_COLORS = {
    0: (0xFF, 0x7F, 0x00),
    1: (0x37, 0x7E, 0xB8),
}

# -------------------------------------------------------------------------
# PENROSE
# -------------------------------------------------------------------------
# Deflation stops before the triangle count would pass this.
MAX_TILES = 20000
