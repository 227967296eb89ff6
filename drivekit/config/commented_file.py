# drivekit/config/commented_file.py

import logging
from typing import List

logger = logging.getLogger("drivekit")


def read_commented_file(path: str, comment: str) -> List[str]:
    """
    Read the directives of a line-oriented config file (e.g. .driveignore).

    Each line is stripped of its line ending and surrounding spaces. Only
    "\\n" and "\\r\\n" end a line. Empty lines and lines starting with
    ``comment`` are skipped. Bytes that are not valid UTF-8 are kept as
    surrogate escapes. An open failure propagates as the underlying OSError.
    """
    clauses: List[str] = []

    with open(
            path, "r", encoding="utf-8", errors="surrogateescape", newline="\n"
    ) as f:
        for line in f:
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            line = line.strip(" ")
            if not line or line.startswith(comment):
                continue
            clauses.append(line)

    logger.debug(
        f"Read {len(clauses)} directives from {path}",
        extra={"path": path},
    )
    return clauses
