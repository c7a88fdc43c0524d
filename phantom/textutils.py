"""Small text helpers: whole-file reads and first-occurrence replacement."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def read_file(filename: PathLike) -> str:
    """Return the whole content of a text file.

    Raises OSError (such as FileNotFoundError) when the file cannot be opened.
    """
    with open(filename, encoding="utf-8") as handle:
        return handle.read()


def replace_first(text: str, old: str, new: str) -> str:
    """Replace only the first occurrence of ``old`` in ``text`` with ``new``.

    The text comes back unchanged when ``old`` does not occur in it.
    """
    return text.replace(old, new, 1)