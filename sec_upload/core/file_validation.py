"""
File content validation using magic bytes.
The real media type is sniffed from the first bytes of the file; the
filename is only trusted when it agrees with the sniffed type.
"""

import enum
import os
from typing import Optional, Union

import filetype
from filetype.types import IMAGE, VIDEO
from filetype.types.base import Type

from sec_upload.core.exceptions import UnknownFileTypeError

# filetype never looks further than this into a file
SIGNATURE_BYTES: int = 8192

PathLike = Union[str, os.PathLike]


class FileClassification(enum.IntEnum):
    INVALID = 0
    IMAGE = 1
    VIDEO = 2


def sniff_file(path: PathLike) -> Optional[Type]:
    """
    Read the signature window of a file and return the matching
    filetype kind, or None when no signature is recognized.

    Raises:
        OSError: If the file is missing or cannot be read
    """
    with open(path, "rb") as f:
        head = f.read(SIGNATURE_BYTES)
    return filetype.guess(head)


def extension_matches(path: PathLike, extension: str) -> bool:
    """
    Return True if the filename ends with the given extension.
    Case-insensitive literal comparison: "a.JPG" matches "jpg",
    "a.jpg.png" does not.
    """
    suffix = "." + extension.lower().lstrip(".")
    return os.fspath(path).lower().endswith(suffix)


def validate_file(path: PathLike, check_extension: bool) -> FileClassification:
    """
    Validate a file by checking that it is an image or a video, and
    optionally that its extension agrees with its content.

    Args:
        path: Path to an existing, readable file
        check_extension: Require the filename extension to match the sniffed type

    Returns:
        FileClassification: IMAGE or VIDEO for accepted files, INVALID when the
        content is another media kind or the extension does not match

    Raises:
        OSError: If the file could not be found or opened
        UnknownFileTypeError: If no known signature matches the content
    """
    kind = sniff_file(path)
    if kind is None:
        raise UnknownFileTypeError()

    if check_extension and not extension_matches(path, kind.extension):
        return FileClassification.INVALID

    if kind in IMAGE:
        return FileClassification.IMAGE
    if kind in VIDEO:
        return FileClassification.VIDEO
    return FileClassification.INVALID
