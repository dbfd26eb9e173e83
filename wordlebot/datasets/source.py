"""
Word source: the locally cached, frequency-ranked word list.

The upstream list (Peter Norvig's unigram counts) is newline-delimited with
one `word<TAB>count` per line, already sorted by descending count. We keep the
raw file on disk exactly as downloaded and parse it on every run, so the
on-disk copy stays byte-identical to the source.

Typical use:
    src = WordSource("words.txt")
    src.ensure_source()           # downloads once if the file is missing
    words = src.load_words(10000) # top 10k five-letter words, most frequent first
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import requests
from tqdm import tqdm

from wordlebot.engine.validation import WORD_LENGTH

DEFAULT_URL = "https://norvig.com/ngrams/count_1w.txt"
DEFAULT_WORDS_FILE = "words.txt"
DEFAULT_COUNT = 10000

CHUNK_SIZE = 64 * 1024


class WordSource:
    """
    Local word file plus where to fetch it from when it is missing.

    Args:
      path    : local file path
      url     : remote list to download from
      timeout : seconds for the HTTP request; None waits indefinitely
      progress: show a tqdm bar (on stderr) while downloading
    """

    def __init__(self, path: Path | str = DEFAULT_WORDS_FILE, *, url: str = DEFAULT_URL,
                 timeout: float | None = None, progress: bool = True):
        self.path = Path(path)
        self.url = url
        self.timeout = timeout
        self.progress = progress

    def __repr__(self) -> str:
        return f"WordSource(path={str(self.path)!r}, url={self.url!r})"

    def exists(self) -> bool:
        return self.path.exists()

    def ensure_source(self) -> bool:
        """
        Download the word list unless the local file already exists.

        Returns True if a download happened, False if the file was present.
        Raises requests.RequestException on network/HTTP failure and OSError
        if the file cannot be written. A single attempt, no retries.
        """
        if self.exists():
            return False
        self.download()
        return True

    def download(self) -> None:
        """
        Fetch `url` and write the response body verbatim to `path`.

        The body is streamed into a sibling `.part` file and moved onto `path`
        only once complete; `path` never holds a partial body.
        """
        part = self.path.with_name(self.path.name + ".part")
        with requests.get(self.url, stream=True, timeout=self.timeout) as r:
            r.raise_for_status()
            total = int(r.headers.get("content-length", 0)) or None

            self.path.parent.mkdir(parents=True, exist_ok=True)
            try:
                with part.open("wb") as f, tqdm(
                        total=total, unit="B", unit_scale=True, desc=self.path.name,
                        ncols=80, disable=not self.progress) as bar:
                    for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                        f.write(chunk)
                        bar.update(len(chunk))
                part.replace(self.path)
            finally:
                part.unlink(missing_ok=True)

    def load_words(self, count: int = DEFAULT_COUNT) -> List[str]:
        """
        Read up to `count` words of length WORD_LENGTH, in file order.

        Each line is `word<TAB>frequency`; the frequency field is dropped.
        A line with no tab is taken as a bare word. File order is assumed
        to be descending frequency, so the result is most-frequent first.

        Raises FileNotFoundError (or another OSError) if the file can't be read.
        A file that is not valid UTF-8 raises UnicodeDecodeError.
        """
        words: List[str] = []
        if count <= 0:
            return words

        with self.path.open("r", encoding="utf-8") as f:
            for line in f:
                word = parse_line(line)
                if len(word) != WORD_LENGTH:
                    continue
                words.append(word)
                if len(words) >= count:
                    break

        return words


def parse_line(line: str) -> str:
    """
    Extract the word field from one `word<TAB>frequency` line.
    With extra tab-separated fields, the first one is the word.
      parse_line("about\\t1226734006\\n") -> "about"
    """
    return line.rstrip("\r\n").split("\t", 1)[0]
