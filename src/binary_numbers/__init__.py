"""Binary number conversion."""

from .converter import (
    ConversionResult,
    convert_binary,
    convert_numbers,
    read_numbers_file,
)

__all__ = [
    "ConversionResult",
    "convert_binary",
    "convert_numbers",
    "read_numbers_file",
]
