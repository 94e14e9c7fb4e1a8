"""
Pipeline package for the render-to-video encoder.
Groups render directory selection and ffmpeg encoding.
"""
from .errors import RenderDirectoryNotFoundError, EncoderError
from .selector import RenderCandidate, find_latest_render_dir
from .encoder import build_output_path, encode_frames

__all__ = [
    "RenderDirectoryNotFoundError",
    "EncoderError",
    "RenderCandidate",
    "find_latest_render_dir",
    "build_output_path",
    "encode_frames",
]
