# mount_stick/loader.py
"""
WORKBOOK LOADER: Fetch and Decode the Three-Sheet Spreadsheet
=============================================================

PURPOSE:
--------
Get the raw bytes of an .xlsx workbook from wherever it lives (local file,
HTTP(S) URL, in-memory upload), decode the member / node / support sheets
with pandas, and hand them to the mapper.

FETCH CHECK:
------------
A URL fetch must come back with a 2xx status AND an xlsx content type.
Development servers often answer a missing file with an HTML fallback page
and status 200; decoding that as a workbook would give a confusing error,
so we reject it up front and log the start of the body instead.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Dict, Iterable, Union

import pandas as pd
import requests

from .mapping import SheetLayout, build_model
from .model import StickModel

logger = logging.getLogger(__name__)

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
ACCEPTED_MIME = (XLSX_MIME, "application/octet-stream")

Source = Union[str, Path, bytes, BinaryIO]


class WorkbookError(RuntimeError):
    """Base class for everything that can go wrong while loading a workbook."""
    pass


class WorkbookFetchError(WorkbookError):
    """Raised when the workbook bytes cannot be obtained."""
    pass


class WorkbookFormatError(WorkbookError):
    """Raised when the bytes are not a readable .xlsx workbook."""
    pass


class SheetMissingError(WorkbookError):
    """Raised when a required sheet is not in the workbook."""
    pass


def is_url(source: Source) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def describe_source(source: Source) -> str:
    """Short label for a source, used in logs and on the model."""
    if isinstance(source, (str, Path)):
        return str(source)
    if isinstance(source, (bytes, bytearray)):
        return "<bytes>"
    return getattr(source, "name", None) or "<upload>"


def _fetch_url(url: str, timeout: float) -> bytes:
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise WorkbookFetchError(f"Error downloading workbook from {url}: {e}") from e

    if not response.ok:
        raise WorkbookFetchError(f"HTTP error! Status: {response.status_code} ({url})")

    content_type = response.headers.get("content-type", "")
    if not any(mime in content_type for mime in ACCEPTED_MIME):
        logger.error("Expected an xlsx workbook from %s, received %r: %s",
                     url, content_type, response.text[:200])
        raise WorkbookFetchError(
            f"Unexpected content type {content_type!r} from {url} (expected {XLSX_MIME})"
        )
    return response.content


def fetch_workbook(source: Source, timeout: float = 30) -> bytes:
    """
    Obtain the raw workbook bytes.

    Parameters:
    -----------
    source : str | Path | bytes | binary file-like
        Local path, http(s) URL, raw bytes or an open binary stream
        (e.g. a Streamlit UploadedFile)
    timeout : float
        Seconds to wait for a URL fetch

    Returns:
    --------
    bytes

    Raises:
    -------
    WorkbookFetchError
        Missing file, transport failure, non-2xx status or non-xlsx
        content type
    """
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if is_url(source):
        return _fetch_url(source, timeout)
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.is_file():
            raise WorkbookFetchError(f"Workbook not found: {path}")
        return path.read_bytes()
    if hasattr(source, "read"):
        return source.read()
    raise WorkbookFetchError(f"Unsupported workbook source: {type(source).__name__}")


def read_sheets(data: bytes, sheet_names: Iterable[str] = ("A", "B", "C")) -> Dict[str, pd.DataFrame]:
    """
    Decode the requested sheets from workbook bytes.

    Sheets are read with header=None so every row, header included, is
    data; the mapper decides which rows to skip.

    Raises:
    -------
    WorkbookFormatError
        If the bytes are not a readable workbook
    SheetMissingError
        If any requested sheet is absent
    """
    sheet_names = list(sheet_names)
    try:
        book = pd.ExcelFile(io.BytesIO(data), engine="openpyxl")
    except Exception as e:
        raise WorkbookFormatError(f"Could not read workbook: {e}") from e

    with book:
        missing = [name for name in sheet_names if name not in book.sheet_names]
        if missing:
            raise SheetMissingError(
                f"Workbook is missing sheet(s) {missing}; found {book.sheet_names}"
            )
        return {name: book.parse(name, header=None) for name in sheet_names}


def load_model(
    source: Source,
    layout: SheetLayout = SheetLayout(),
    timeout: float = 30,
) -> StickModel:
    """
    Fetch, decode and map a workbook in one call.

    Example:
    --------
    >>> model = load_model("Sample.xlsx")
    >>> model = load_model("http://localhost:3000/Sample.xlsx", SheetLayout(members="Members"))
    """
    label = describe_source(source)
    logger.info("Loading workbook from %s", label)
    data = fetch_workbook(source, timeout=timeout)
    tables = read_sheets(data, layout.names)
    return build_model(tables, layout, source=label)
