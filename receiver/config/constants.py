"""Theme and timing constants for the Half-Wit receiver.

Colours use RGBA normalized to the 0-1 range. Durations are milliseconds
unless the name says otherwise.
"""

# Primary theme colors
BASE_BG = (14/255, 16/255, 32/255, 1)  # Deep dark blue background
DARK_BG = (26/255, 31/255, 58/255, 1)  # Cards and entries
DARK_BG2 = (18/255, 20/255, 38/255, 1)  # Text fields

# Accents
PINK = (255/255, 88/255, 160/255, 1)
GREEN = (72/255, 214/255, 140/255, 1)
PURPLE = (132/255, 99/255, 255/255, 1)
BLUE = (78/255, 138/255, 255/255, 1)
GRAY = (90/255, 96/255, 120/255, 1)

# Text colors
TEXT_PRIMARY = (242/255, 245/255, 255/255, 1)
TEXT_HINT = (140/255, 154/255, 188/255, 1)

# Timer circle states
TIMER_COLORS = {
    "neutral": BLUE,
    "warning": (255/255, 190/255, 70/255, 1),
    "critical": (255/255, 72/255, 72/255, 1),
}

# Leaderboard rank colors (rank-1, rank-2, rank-3, everyone else)
RANK_COLORS = {
    1: (255/255, 206/255, 84/255, 1),  # gold
    2: (200/255, 208/255, 224/255, 1),  # silver
    3: (222/255, 148/255, 96/255, 1),  # bronze
}
DEFAULT_RANK_COLOR = TEXT_HINT

# Timer urgency thresholds (seconds remaining)
TIMER_CRITICAL_SECONDS = 5
TIMER_WARNING_SECONDS = 10

# Leaderboards switch to a compact layout at this many players
COMPACT_LEADERBOARD_PLAYERS = 6

# Round results reorder animation
REORDER_DWELL_MS = 3000
REORDER_MOTION_MS = 800
REORDER_SETTLE_MS = 850
DEFAULT_ENTRY_SPACING = 75
ENTRY_GAP_ESTIMATE = 15

# Tutorial
TUTORIAL_STEP_COUNT = 7
TUTORIAL_FADE_MS = 300
DEFAULT_TUTORIAL_ROUNDS = 3
DEFAULT_ANSWER_TIME_SECONDS = 60
