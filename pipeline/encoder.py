"""
ffmpeg encoding of a numbered PNG frame sequence into an MP4.
The argument set is fixed; only the frame rate varies between runs.
"""
import os
import subprocess
from pathlib import Path
from typing import List, Union

from utils.logger import setup_logger
from pipeline.errors import EncoderError
from config import (
    FFMPEG_BINARY,
    FRAME_PATTERN,
    VIDEO_EXTENSION,
    VIDEO_CODEC,
    PIXEL_FORMAT,
    PRESET,
    CRF,
)

logger = setup_logger(__name__)


def build_frame_pattern(frames_dir: Union[str, Path]) -> str:
    """Return the printf-style input pattern for the frames in `frames_dir`."""
    return os.path.join(str(frames_dir), FRAME_PATTERN)


def build_output_path(output_dir: Union[str, Path], frames_dir: Union[str, Path]) -> str:
    """Return `<output_dir>/<frames_dir basename>.mp4`."""
    return os.path.join(str(output_dir), Path(frames_dir).name + VIDEO_EXTENSION)


def build_ffmpeg_command(frame_pattern: str, output_path: str, fps: int) -> List[str]:
    """
    Build the ffmpeg argument list.

    Args:
        frame_pattern: Input pattern such as render_x/frame_%05d.png
        output_path: Output video file path
        fps: Input frame rate

    Returns:
        Command list suitable for subprocess.run
    """
    return [
        FFMPEG_BINARY,
        "-y",  # Overwrite output if it exists
        "-framerate", str(fps),
        "-i", frame_pattern,
        "-c:v", VIDEO_CODEC,
        "-pix_fmt", PIXEL_FORMAT,
        "-preset", PRESET,
        "-crf", str(CRF),
        output_path,
    ]


def encode_frames(frames_dir: Union[str, Path], output_path: str, fps: int) -> str:
    """
    Encode the frame sequence in `frames_dir` into `output_path`.

    Blocks until ffmpeg exits. ffmpeg's output goes straight to the terminal.

    Returns:
        Output path

    Raises:
        EncoderError: If ffmpeg exits with a non-zero status
        OSError: If ffmpeg cannot be started
    """
    cmd = build_ffmpeg_command(build_frame_pattern(frames_dir), str(output_path), fps)
    logger.info(f"Executing FFmpeg command: {' '.join(cmd)}")

    result = subprocess.run(cmd)
    if result.returncode != 0:
        raise EncoderError(result.returncode, cmd)

    return str(output_path)
