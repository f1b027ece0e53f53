from .detect import detect_version
from .loader import dump_document, load_document, parse_document, read_document

__all__ = ["detect_version", "dump_document", "load_document", "parse_document", "read_document"]
