# drivekit/desktop/entry.py

import logging
from dataclasses import dataclass

logger = logging.getLogger("drivekit")

MIME_TYPE_JOINER = "-"
UNESCAPED_PATH_SEP = "/"
LINK_KEY = "Link"

DESKTOP_ENTRY_TEMPLATE = (
    "[Desktop Entry]\n"
    "Icon={icon}\n"
    "Name={name}\n"
    "Type={type}\n"
    "URL={url}\n"
)


class DesktopEntryWriteError(OSError):
    """Raised when a shortcut file was created but could not be fully written."""

    def __init__(self, dest_path: str, bytes_written: int, reason: OSError):
        super().__init__(
            f"Failed writing desktop entry {dest_path} "
            f"after {bytes_written} bytes: {reason}"
        )
        self.dest_path = dest_path
        self.bytes_written = bytes_written


@dataclass
class UrlMimeTypeExt:
    url: str
    mime_type: str
    ext: str = ""


@dataclass
class DesktopEntry:
    name: str
    url: str
    icon: str


def to_desktop_entry(name: str, url_mime_ext: UrlMimeTypeExt) -> DesktopEntry:
    if url_mime_ext.ext:
        name = f"{name}-{url_mime_ext.ext}"
    return DesktopEntry(
        name=name,
        url=url_mime_ext.url,
        icon=url_mime_ext.mime_type,
    )


def render_desktop_entry(entry: DesktopEntry) -> str:
    icon = entry.icon.replace(UNESCAPED_PATH_SEP, MIME_TYPE_JOINER)
    return DESKTOP_ENTRY_TEMPLATE.format(
        icon=icon,
        name=entry.name,
        type=LINK_KEY,
        url=entry.url,
    )


def serialize_as_desktop_entry(
        name: str,
        dest_path: str,
        url_mime_ext: UrlMimeTypeExt,
) -> int:
    """
    Write a shortcut to a remote file and return the number of bytes written.

    The destination is created or truncated. Failing to create it raises the
    underlying OSError; a failed write raises DesktopEntryWriteError holding
    the partial byte count.
    """
    entry = to_desktop_entry(name, url_mime_ext)
    data = render_desktop_entry(entry).encode("utf-8")

    written = 0
    with open(dest_path, "wb", buffering=0) as handle:
        try:
            while written < len(data):
                written += handle.write(data[written:])
        except OSError as e:
            raise DesktopEntryWriteError(dest_path, written, e) from e

    logger.debug(
        f"Wrote desktop entry {dest_path} ({written} bytes)",
        extra={"path": dest_path, "bytes_written": written},
    )
    return written
