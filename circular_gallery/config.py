"""Gallery configuration constants."""

from __future__ import annotations

# Performance
TARGET_FPS = 60
ASYNC_WORKERS = 4
UI_EVENTS_PER_FRAME = 32
MAX_DPR = 2.0

# Camera (world units)
CAMERA_FOV_DEG = 45.0
CAMERA_DISTANCE = 20.0

# Card layout
REFERENCE_HEIGHT = 1500.0
CARD_BASE_PX = 700.0
CARD_PADDING = 2.0
TITLE_HEIGHT_FRAC = 0.15
TITLE_GAP = 0.05

# Idle motion
TIME_STEP = 0.04
TIME_SEED_RANGE = 100.0
WOBBLE_AMPLITUDE = 1.5
WOBBLE_BASE = 0.1
WOBBLE_SPEED_GAIN = 0.5
WOBBLE_PX = 2.0

# Input
DRAG_THRESHOLD_PX = 5
DRAG_SCALE = 0.025
WHEEL_STEP_ITEMS = 1

# Hit regions
EYE_BTN_SIZE = 36
EYE_BTN_MARGIN = 8
EYE_FADE_SPEED = 0.2
NAV_BTN_RADIUS = 22
NAV_BTN_MARGIN = 16
NAV_BTN_BG_ALPHA = 0.45

# Images
TEXTURE_SIZE = 512
HTTP_TIMEOUT_S = 10
HTTP_USER_AGENT = "circular-gallery/0.1"
PLACEHOLDER_COLOR = (64, 64, 64, 255)

# Window
WINDOW_TITLE = "Circular Gallery"

# Defaults for GalleryOptions
DEFAULT_BEND = 1.5
DEFAULT_TEXT_COLOR = "#ffffff"
DEFAULT_BORDER_RADIUS = 0.2
DEFAULT_SCROLL_SPEED = 1.5
DEFAULT_SCROLL_EASE = 0.05
DEFAULT_AUTO_SCROLL = True
DEFAULT_AUTO_SCROLL_SPEED = 0.1
DEFAULT_HEIGHT = 400
DEFAULT_WIDTH = 1200

# Shown when the caller passes no items
PLACEHOLDER_ITEMS = [
    {"image": "https://picsum.photos/seed/1/800/600?grayscale", "text": "Bridge"},
    {"image": "https://picsum.photos/seed/2/800/600?grayscale", "text": "Desk Setup"},
    {"image": "https://picsum.photos/seed/3/800/600?grayscale", "text": "Waterfall"},
    {"image": "https://picsum.photos/seed/4/800/600?grayscale", "text": "Strawberries"},
    {"image": "https://picsum.photos/seed/5/800/600?grayscale", "text": "Deep Diving"},
    {"image": "https://picsum.photos/seed/16/800/600?grayscale", "text": "Train Track"},
    {"image": "https://picsum.photos/seed/17/800/600?grayscale", "text": "Santorini"},
    {"image": "https://picsum.photos/seed/8/800/600?grayscale", "text": "Blurry Lights"},
    {"image": "https://picsum.photos/seed/9/800/600?grayscale", "text": "New York"},
    {"image": "https://picsum.photos/seed/10/800/600?grayscale", "text": "Good Boy"},
    {"image": "https://picsum.photos/seed/21/800/600?grayscale", "text": "Coastline"},
    {"image": "https://picsum.photos/seed/12/800/600?grayscale", "text": "Palm Trees"},
]

# Supported local image extensions
IMG_EXTS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".webp"})

# Background behind the cards (RGBA)
BG_COLOR = (16, 16, 16, 255)
