from .config import TruncateOptions, WhitespaceMode
from .errors import ConfigurationError, InvalidLimit, InvariantViolation
from .markup import display_truncated_text
from .truncation import truncate_text, truncation_pairs

__all__: list[str] = [
    "ConfigurationError",
    "InvalidLimit",
    "InvariantViolation",
    "TruncateOptions",
    "WhitespaceMode",
    "display_truncated_text",
    "truncate_text",
    "truncation_pairs",
]
