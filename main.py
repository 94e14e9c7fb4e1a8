"""
Main module for the render-to-video encoder.
Encodes the newest render directory's frames into an MP4 with ffmpeg,
then deletes the render directory once the video has been written.

Usage:
  python main.py        # 30 fps
  python main.py 24     # 24 fps
"""

import re
import sys
from typing import List, Optional
from utils.logger import setup_logger
from utils.helpers import ensure_directory, remove_directory_tree
from pipeline.selector import find_latest_render_dir
from pipeline.encoder import build_output_path, encode_frames

from config import RENDERS_ROOT_DIR, OUTPUT_DIR, DEFAULT_FPS

logger = setup_logger(__name__)

# Optional sign followed by ASCII digits, nothing else
_FPS_RE = re.compile(r"[+-]?[0-9]+")
_FPS_MIN = -2**31
_FPS_MAX = 2**31 - 1


def parse_fps(value: Optional[str], default: int = DEFAULT_FPS) -> int:
    """
    Parse the frame rate argument.

    Accepts an optional sign followed by ASCII digits that fits a signed
    32-bit integer. Anything else (missing, padded, non-ASCII digits,
    out of range) returns `default`.
    """
    if value is None or not _FPS_RE.fullmatch(value):
        return default
    fps = int(value)
    if not _FPS_MIN <= fps <= _FPS_MAX:
        return default
    return fps


def run(argv: Optional[List[str]] = None) -> str:
    """
    Encode the newest render directory and remove it on success.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]); only the
            first one is read, as the frame rate

    Returns:
        Path of the written video

    Raises:
        RenderDirectoryNotFoundError: No render directory to encode
        EncoderError: ffmpeg failed; the render directory is left in place
        OSError: Output directory creation or render directory removal failed
    """
    if argv is None:
        argv = sys.argv[1:]
    fps = parse_fps(argv[0] if argv else None)
    logger.info(f"Converting frames to video at {fps} fps")

    ensure_directory(OUTPUT_DIR)

    latest_dir = find_latest_render_dir(RENDERS_ROOT_DIR)
    logger.info(f"Processing directory: {latest_dir.name}")

    output_file = build_output_path(OUTPUT_DIR, latest_dir)
    encode_frames(latest_dir, output_file, fps)
    logger.info(f"Video created successfully: {output_file}")

    # Delete the render directory with all its PNG frames
    remove_directory_tree(latest_dir)
    logger.info(f"Deleted render folder: {latest_dir}")

    return output_file


if __name__ == "__main__":
    try:
        run()
    except Exception as e:
        logger.error(f"Error encoding video: {e}")
        sys.exit(1)
