"""Default configuration constants for the Classroom Seating Planner."""

# Logging
LOG_LEVEL = "INFO"

# Course types (value -> display label)
COURSE_LABELS = {
    "robot": "Robot",
    "game": "Game",
    "fab": "Digital Fab",
    "prime": "Prime",
}

# Shared seats are filled in this course order within a run
SHARED_COURSE_ORDER = ["game", "fab", "prime"]

# Seat table: (seat id, family, priority tier, (x, y) reference position in %)
# Families: "robot" = square desks (focused course only), "game-fab" = long desks.
# Tiers apply to the robot family only.
SEAT_TABLE = [
    ("1", "game-fab", None, (15, 16)),
    ("2", "game-fab", None, (25, 12)),
    ("3", "game-fab", None, (35, 12)),
    ("4", "game-fab", None, (45, 12)),
    ("5", "game-fab", None, (62, 12)),
    ("6", "game-fab", None, (72, 12)),
    ("7", "robot", "high", (86, 20)),
    ("8", "robot", "high", (86, 30)),
    ("9", "robot", "low", (86, 40)),
    ("10", "robot", "low", (86, 50)),
    ("11", "robot", "high", (86, 60)),
    ("12", "robot", "high", (86, 70)),
    ("13", "game-fab", None, (78, 86)),
    ("14", "game-fab", None, (68, 86)),
    ("15", "game-fab", None, (58, 86)),
    ("16", "game-fab", None, (40, 86)),
    ("17", "robot", "overflow", (30, 93)),
    ("18", "robot", "overflow", (20, 93)),
    ("19", "game-fab", None, (12, 76)),
    ("20", "game-fab", None, (12, 66)),
    ("21", "game-fab", None, (12, 56)),
    ("22", "robot", "high", (14, 44)),
    ("23", "robot", "high", (14, 34)),
    ("24", "robot", "high", (14, 24)),
]

# Clockwise seat order used for contiguity
CLOCKWISE_ORDER = [seat_id for seat_id, _, _, _ in SEAT_TABLE]

# Valid consecutive pairs in clockwise order.
# 4->5 (top L desk to top right desk) and 15->16 (bottom right to bottom left)
# are physical gaps and are left out.
CLOCKWISE_GAPS = {("4", "5"), ("15", "16")}
ADJACENT_PAIRS = [
    (a, b)
    for a, b in zip(CLOCKWISE_ORDER, CLOCKWISE_ORDER[1:] + CLOCKWISE_ORDER[:1])
    if (a, b) not in CLOCKWISE_GAPS
]

# Synthetic edges that jump over the low-priority robot seats (9, 10).
# Honoured only when the skip policy allows it.
SKIP_PAIRS = [("8", "11")]

# Overflow ("floor") seats, in the order they are handed out
OVERFLOW_SEAT_ORDER = ["17", "18"]

# Groups with this many shared-course students and no robot students sort first
SHARED_BLOCK_SIZE = 4

# The 8->11 jump is only allowed while the robot headcount leaves slack
SKIP_JUMP_MAX_FOCUSED = 7

# When robot students overflow, at least this many of the group still sit in a run
MIN_SEATED_WITH_OVERFLOW = 2

# Error text for groups that cannot be seated
UNPLACEABLE_REASON = (
    "Could not secure a contiguous block of seats. "
    "Reduce the headcount or adjust the other mentors' groups."
)

# Editor bounds
MAX_GROUPS = 14
MAX_HEADCOUNT = 12

# Group colour palette (pastel), cycled by mentor number
GROUP_PALETTE = [
    "#B8D4F0",
    "#A9E2DA",
    "#F2DCA6",
    "#F0B8D6",
    "#B5E3B5",
    "#C9BCEE",
    "#F3B9AC",
    "#E2B3E6",
]
EMPTY_SEAT_COLOR = "#F2F2F2"
FAMILY_OUTLINE_COLORS = {"robot": "#4A90D9", "game-fab": "#E8734A"}
