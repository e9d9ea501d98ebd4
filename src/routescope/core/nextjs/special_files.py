from __future__ import annotations

"""
Next.js Special-File Classifier.

Pure functions mapping a file path onto the Next.js reserved-name taxonomy.
No file content is inspected: client/server nature is approximated from
the extension alone (markup-bearing extensions are treated as client code).
"""

import os
from typing import Iterable, List

from routescope.domain.constants import (
    INDEX_FILE_NAME,
    MARKUP_EXTENSIONS,
    SOURCE_EXTENSIONS,
    SPECIAL_FILE_NAMES,
)
from routescope.domain.models import FileType, SpecialFileInfo


def _split_name(file_path: str):
    file_name = os.path.basename(file_path)
    stem, extension = os.path.splitext(file_name)
    return file_name, stem, extension


def is_special_file(file_path: str) -> bool:
    """
    True when the extension is a JS/TS source one and the stem is reserved or ``index``.
    """
    _, stem, extension = _split_name(file_path)
    if extension not in SOURCE_EXTENSIONS:
        return False
    return stem in SPECIAL_FILE_NAMES or stem == INDEX_FILE_NAME


def classify_file(file_path: str) -> SpecialFileInfo:
    """
    Classify one path.

    ``index`` files are typed as ``page`` but do not count as special files;
    only the nine reserved names set ``is_special_file``.

    Args:
        file_path: Absolute or relative path.

    Returns:
        SpecialFileInfo: Classification record.
    """
    file_name, stem, extension = _split_name(file_path)

    if stem in SPECIAL_FILE_NAMES:
        file_type = FileType(stem)
    elif stem == INDEX_FILE_NAME:
        file_type = FileType.PAGE
    else:
        file_type = FileType.OTHER

    special = stem in SPECIAL_FILE_NAMES
    client = extension in MARKUP_EXTENSIONS

    return SpecialFileInfo(
        file_path=file_path,
        file_name=file_name,
        file_type=file_type,
        extension=extension,
        is_special_file=special,
        is_client_component=client,
        is_server_component=special and not client,
    )


def filter_special_files(file_paths: Iterable[str]) -> List[str]:
    """Keep paths accepted by ``is_special_file``, in input order."""
    return [p for p in file_paths if is_special_file(p)]


def analyze_files(file_paths: Iterable[str]) -> List[SpecialFileInfo]:
    """Classify every path and keep the special ones, in input order."""
    return [info for info in map(classify_file, file_paths) if info.is_special_file]
