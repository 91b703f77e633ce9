"""Value codecs: text chunking and image validation."""

from linkboard.codec.chunking import DEFAULT_PARTS, TEXT_LIMIT, chunk, join, part_names, split_parts
from linkboard.codec.validation import is_valid_image_url

__all__ = ["DEFAULT_PARTS", "TEXT_LIMIT", "chunk", "is_valid_image_url", "join", "part_names", "split_parts"]
