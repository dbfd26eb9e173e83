"""
Source file summary.

What this module does:
- Describe the local word file a run used: size in bytes, number of lines,
  number of `word<TAB>frequency` lines whose word has WORD_LENGTH letters,
  and the SHA-256 of the raw bytes.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordlebot.datasets import describe_source, pretty_summary
    print(pretty_summary(describe_source("words.txt")))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict
import hashlib

from wordlebot.engine.validation import WORD_LENGTH
from .source import parse_line


@dataclass
class SourceReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    size_bytes: int      # raw file size (0 if missing)
    lines: int           # total number of lines
    words_n: int         # lines whose word field has exactly WORD_LENGTH chars
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def describe_source(path: Path | str) -> Dict:
    """
    Summarize the word file at `path`.

    A missing file is not an error here; the report says exists=False so the
    caller can decide what to do.
    """
    p = Path(path)
    if not p.exists():
        return asdict(SourceReport(str(p), False, 0, 0, 0, ""))

    lines = 0
    words_n = 0
    with p.open("r", encoding="utf-8") as f:
        for line in f:
            lines += 1
            if len(parse_line(line)) == WORD_LENGTH:
                words_n += 1

    rep = SourceReport(
        path=str(p),
        exists=True,
        size_bytes=p.stat().st_size,
        lines=lines,
        words_n=words_n,
        sha256=_sha256_file(p),
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        source=words.txt | lines=333333 | 5-letter=39933 | 4.9 MB | sha=abc123def456
    """
    if not report["exists"]:
        return f"source={report['path']} | MISSING"
    mb = report["size_bytes"] / 1_000_000
    return (
        f"source={report['path']} | lines={report['lines']} "
        f"| {WORD_LENGTH}-letter={report['words_n']} | {mb:.1f} MB "
        f"| sha={report['sha256'][:12]}"
    )
