from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

import requests

DEFAULT_TIMEOUT = 30


def is_url(source: Path | str) -> bool:
    return str(source).lower().startswith(("http://", "https://"))


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def fetch_lines(url: str, timeout: float = DEFAULT_TIMEOUT) -> List[str]:
    """
    Download a text word list over HTTP(S) and split it into lines.
    Raises requests.HTTPError on a non-2xx response.
    """
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.text.splitlines()


def read_source(source: Path | str, timeout: float = DEFAULT_TIMEOUT) -> List[str]:
    """Lines from a local path or an http(s) URL."""
    if is_url(source):
        return fetch_lines(str(source), timeout=timeout)
    return read_lines(source)


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
