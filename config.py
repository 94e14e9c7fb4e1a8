"""
Configuration settings for the render-to-video encoder.
Contains paths, encoder settings, and logging parameters.

Paths and encoder settings are fixed. Only the console log level may be
overridden from the environment (or a .env file).
"""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# ------------------------------------------------------------
# File paths (directories, not individual files)
# ------------------------------------------------------------
RENDERS_ROOT_DIR = "./image_renders"
OUTPUT_DIR = "./rendered_videos"

# Only subdirectories whose name starts with this prefix are encoded
RENDER_DIR_PREFIX = "render"

# Frame files inside a render directory: frame_00000.png, frame_00001.png, ...
FRAME_PATTERN = "frame_%05d.png"
VIDEO_EXTENSION = ".mp4"

# ------------------------------------------------------------
# Video settings
# ------------------------------------------------------------
DEFAULT_FPS = 30  # Used when no (or an unparsable) frame rate is given
FFMPEG_BINARY = "ffmpeg"
VIDEO_CODEC = "libx264"
PIXEL_FORMAT = "yuv420p"
PRESET = "medium"
CRF = 23  # Good quality/size balance

# ------------------------------------------------------------
# Logging
# ------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = "logs"
