"""
Transcript Text Extraction

Turns an uploaded transcript file into plain text. Dispatches on the
lowercased file extension; only plain text and Word (.docx) documents
are accepted.
"""

import io
import logging
import zipfile
from pathlib import PurePath
from typing import Iterator

import docx
from docx.opc.exceptions import PackageNotFoundError
from docx.table import Table
from docx.text.paragraph import Paragraph

from ..core.exceptions import DocumentExtractionError, UnsupportedFileTypeError


logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".txt", ".docx")


def get_extension(file_name: str) -> str:
    """Lowercased extension including the dot ("" when there is none)."""
    return PurePath(file_name or "").suffix.lower()


def extract_text(file_name: str, data: bytes) -> str:
    """
    Extract plain text from an uploaded transcript.

    Args:
        file_name: Original file name (used only for its extension)
        data: Raw file bytes

    Returns:
        Transcript text

    Raises:
        UnsupportedFileTypeError: Extension is not .txt or .docx
        DocumentExtractionError: .docx payload could not be opened
    """
    extension = get_extension(file_name)

    if extension == ".txt":
        return _decode_text(data)
    if extension == ".docx":
        return _extract_docx_text(file_name, data)

    logger.info(f"Rejected upload {file_name!r}: unsupported extension {extension!r}")
    raise UnsupportedFileTypeError(file_name, extension)


def _decode_text(data: bytes) -> str:
    # Browsers drop a UTF-8 BOM and substitute U+FFFD for bad sequences
    return data.decode("utf-8-sig", errors="replace")


def _extract_docx_text(file_name: str, data: bytes) -> str:
    try:
        document = docx.Document(io.BytesIO(data))
    except (zipfile.BadZipFile, PackageNotFoundError, KeyError, ValueError) as e:
        logger.warning(f"Could not open Word document {file_name!r}: {e}")
        raise DocumentExtractionError(f"Could not read {file_name}: not a valid .docx document") from e

    blocks = list(_iter_block_text(document))
    text = "\n\n".join(blocks)
    logger.debug(f"Extracted {len(blocks)} text blocks ({len(text)} chars) from {file_name!r}")
    return text


def _iter_block_text(document) -> Iterator[str]:
    """Yield paragraph and table-cell text in document order; styling and images are dropped."""
    for block in document.iter_inner_content():
        if isinstance(block, Paragraph):
            yield block.text
        elif isinstance(block, Table):
            for row in block.rows:
                previous_tc = None
                for cell in row.cells:
                    # Horizontally merged cells are repeated by python-docx
                    if cell._tc is previous_tc:
                        continue
                    previous_tc = cell._tc
                    for paragraph in cell.paragraphs:
                        yield paragraph.text
