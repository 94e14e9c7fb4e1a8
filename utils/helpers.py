"""
Helper functions for the render-to-video encoder.
Contains filesystem utilities used by the driver.
"""

import os
import shutil
from pathlib import Path
from typing import Union
from utils.logger import setup_logger

logger = setup_logger(__name__)

def ensure_directory(path: Union[str, Path]) -> None:
    """
    Ensure a directory exists, create it (and any missing parents) if it doesn't.

    Args:
        path: Path to the directory

    Raises:
        OSError: If the directory cannot be created
    """
    os.makedirs(path, exist_ok=True)
    logger.debug(f"Ensured directory exists: {path}")

def remove_directory_tree(path: Union[str, Path]) -> None:
    """
    Recursively delete a directory and everything inside it.

    Errors are not ignored: a failed deletion raises OSError.
    """
    shutil.rmtree(path)
    logger.debug(f"Removed directory tree: {path}")
