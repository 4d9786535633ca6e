"""
Line reader for mission log files.
"""

from pathlib import Path
from typing import IO, Iterable, Iterator

from mission_analyzer.core.models import RawLine


class MissionLogReader:
    """
    Reads a mission log one line at a time, numbering lines from 1.

    The source is consumed once, top to bottom. Files are decoded line by
    line, so a line with invalid bytes does not stop the lines after it.
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize log reader.

        Args:
            encoding: Text encoding of log files
        """
        self.encoding = encoding

    def read(self, file_path: str | Path) -> Iterator[RawLine]:
        """
        Yield the lines of a log file.

        Undecodable lines are yielded with decode_error set.

        Args:
            file_path: Path to the log file

        Raises:
            OSError: If the file cannot be opened or read
        """
        with open(file_path, "rb") as f:
            for idx, raw in enumerate(f, start=1):
                try:
                    text = raw.decode(self.encoding)
                except UnicodeDecodeError as e:
                    yield RawLine(line_number=idx, text="", decode_error=str(e))
                    continue
                yield RawLine(line_number=idx, text=text.rstrip("\r\n"))

    def read_stream(self, stream: IO[str] | Iterable[str]) -> Iterator[RawLine]:
        """
        Yield the lines of an open text stream or any iterable of strings.

        Line terminators ("\\n" or "\\r\\n") are removed.
        """
        for idx, line in enumerate(stream, start=1):
            yield RawLine(line_number=idx, text=line.rstrip("\r\n"))
