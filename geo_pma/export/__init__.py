"""
Export of records to the PMA text database format.
"""

from .formatter import (
    format_line, format_lines, format_decimal, elevation_feet,
    LINE_FORMATTERS, EMITTABLE_KINDS,
)
from .writer import (
    TranscodingWriter, WriterPolicy, WriteReport, transcode, destination_path,
    LEGACY_ENCODING,
)

__all__ = [
    'format_line',
    'format_lines',
    'format_decimal',
    'elevation_feet',
    'LINE_FORMATTERS',
    'EMITTABLE_KINDS',
    'TranscodingWriter',
    'WriterPolicy',
    'WriteReport',
    'transcode',
    'destination_path',
    'LEGACY_ENCODING',
]
