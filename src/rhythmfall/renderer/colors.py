"""Color palette."""

# RGB / RGBA tuples
BG = (192, 192, 192)
TEXT = (0, 0, 0)
MARKER = (0, 0, 0)
OVERLAY_PANEL = (118, 35, 35, 200)

# Falling symbols, one per character. Order defines the alphabet order.
SYMBOL_PALETTE = {
    "W": (255, 0, 0, 200),
    "A": (0, 255, 0, 200),
    "S": (0, 0, 255, 200),
    "D": (186, 152, 28, 200),
}
SYMBOL_FALLBACK = (90, 90, 90, 200)

# Feedback text
FEEDBACK_TOO_SOON = (38, 216, 239)
FEEDBACK_INCORRECT = (128, 0, 0)
FEEDBACK_PERFECT = (255, 207, 61)
FEEDBACK_NICE = (0, 62, 49)
