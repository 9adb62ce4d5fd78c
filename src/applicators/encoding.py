"""
Base64 encoding of CV attachments.
"""
import base64
from pathlib import Path
from typing import Union
from loguru import logger

PLACEHOLDER_CV_BASE64 = "VGhpcyBpcyBhIHRlc3QgQ1YgZmlsZQ=="  # "This is a test CV file"


def encode_file_to_base64(file_path: Union[str, Path], fallback: str = PLACEHOLDER_CV_BASE64) -> str:
    """Read a file and return its base64 text.

    A file that cannot be read is replaced by ``fallback`` instead of failing,
    so a run without a CV on disk still exercises the submission endpoint.
    Pass ``fallback=""`` to submit an empty attachment instead.
    """
    try:
        with open(file_path, 'rb') as f:
            data = f.read()
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}")
        return fallback
    return base64.b64encode(data).decode('ascii')


class FileEncoder:
    """Encodes attachment files with a fixed fallback policy."""

    def __init__(self, fallback: str = PLACEHOLDER_CV_BASE64):
        self.fallback = fallback

    def encode(self, file_path: Union[str, Path]) -> str:
        return encode_file_to_base64(file_path, fallback=self.fallback)

    @staticmethod
    def decode(encoded: str) -> bytes:
        return base64.b64decode(encoded)
