"""
AISWEB GeoServer to PMA database conversion library.

This package fetches the aeronautical feature layers published by the
AISWEB GeoServer and writes them as the underscore-delimited,
Windows-1252 encoded text files used by the PMA database tool.

The main public API includes:
- FeatureKind: The closed set of layers and output files
- PmaModel: Feature collections gathered for one run
- join_thresholds: Completion of thresholds with runway and airport data
- format_line: Rendering of one record as a PMA line
- TranscodingWriter: Writer for the legacy encoded files
- AiswebSource / LocalFileSource: Feature sources
"""

__version__ = '0.1.0'
__all__ = [
    'FeatureKind',
    'PmaModel',
    'join_thresholds',
    'format_line',
    'TranscodingWriter',
    'WriterPolicy',
    'AiswebSource',
    'LocalFileSource',
]

from .models import FeatureKind, PmaModel
from .core import join_thresholds
from .export import format_line, TranscodingWriter, WriterPolicy
from .sources import AiswebSource, LocalFileSource
