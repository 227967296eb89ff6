#!/usr/bin/env python3
from typing import Tuple

REMOTE_SEP = "/"


def sep_join(sep: str, *args: str) -> str:
    return sep.join(args)


def is_hidden(p: str, ignore: bool) -> bool:
    if p.startswith("."):
        return not ignore
    return False


def remote_path_split(p: str) -> Tuple[str, str]:
    # posixpath.split strips a trailing "/" from the head; remote addressing
    # needs the exact segments, so "a/" must give ("a", "")
    parts = p.split(REMOTE_SEP)
    directory = REMOTE_SEP.join(parts[:-1])
    base = parts[-1]
    return directory, base
