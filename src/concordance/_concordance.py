"""Top-level pipeline: read a document and write its concordance."""

from __future__ import annotations

import locale
import logging
import sys
from pathlib import Path
from typing import TextIO

from ._errors import InputReadError
from ._index import FrequencyIndex
from ._render import write_concordance

log = logging.getLogger(__name__)


def read_document(file_path: Path | str) -> bytes:
    """Read the whole document, raising InputReadError on any I/O failure."""
    try:
        return Path(file_path).read_bytes()
    except OSError as exc:
        raise InputReadError(str(file_path)) from exc


def build_index(text: str) -> FrequencyIndex:
    """Scan ``text`` into a new FrequencyIndex."""
    index = FrequencyIndex()
    n_sentences = index.scan_text(text)
    log.debug("Scanned %d sentences, %d distinct words", n_sentences, len(index))
    return index


def generate(
    file_path: Path | str,
    out: TextIO | None = None,
    *,
    encoding: str | None = None,
) -> None:
    """Write the concordance of the document at ``file_path`` to ``out``.

    Every word occurrence is counted and labelled with the numbers of the
    sentences it appeared in; words are listed alphabetically.

    Args:
        file_path: Path of the text document.
        out: Text sink for the listing. Defaults to ``sys.stdout``.
        encoding: Text encoding of the document. Defaults to the platform's
            preferred encoding.

    Raises:
        InputReadError: the file could not be read. Nothing is written.
    """
    data = read_document(file_path)

    # Nothing to generate for an empty file.
    if not data:
        log.debug("Empty document: %s", file_path)
        return

    if encoding is None:
        encoding = locale.getpreferredencoding(False)
    text = data.decode(encoding, errors="replace")

    index = build_index(text)
    if out is None:
        out = sys.stdout
    write_concordance(index, out)
