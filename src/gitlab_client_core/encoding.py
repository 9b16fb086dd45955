"""Content codecs for the repository file and wiki attachment endpoints."""

import base64

DATA_URI_PREFIX = "data:"
DEFAULT_MEDIA_TYPE = "application/octet-stream"


def encode_base64(content: str | bytes) -> str:
    data = content.encode("utf-8") if isinstance(content, str) else content
    return base64.b64encode(data).decode("ascii")


def decode_base64(content: str) -> str:
    """Decode base64 file content to text; invalid UTF-8 becomes U+FFFD.

    Raises ``binascii.Error`` (a ``ValueError``) when ``content`` is not valid
    base64. Line breaks inside the payload are ignored.
    """
    return base64.b64decode("".join(content.split()), validate=True).decode("utf-8", errors="replace")



def to_data_uri(content: str, media_type: str = DEFAULT_MEDIA_TYPE) -> str:
    """Wrap content as a base64 data URI unless it already is one."""
    if content.startswith(DATA_URI_PREFIX):
        return content
    return f"{DATA_URI_PREFIX}{media_type};base64,{encode_base64(content)}"
