"""
Error types raised by the render-to-video pipeline.
Filesystem failures other than these surface as plain OSError.
"""
from typing import List, Optional


class RenderDirectoryNotFoundError(FileNotFoundError):
    """The renders root is missing, or it holds no render directories."""


class EncoderError(RuntimeError):
    """ffmpeg exited with a non-zero status."""

    def __init__(self, returncode: int, command: Optional[List[str]] = None):
        self.returncode = returncode
        self.command = list(command or [])
        super().__init__(f"FFmpeg command failed (exit code {returncode})")
