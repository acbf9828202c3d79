"""
Detection: quote scanning, matcher compilation and collection.
"""

from costumeswitch.detection.collector import collect_detections, find_matches
from costumeswitch.detection.patterns import (
    CompileOptions,
    build_name_tail,
    compile_profile,
    gather_patterns,
    parse_pattern_entry,
)
from costumeswitch.detection.quotes import get_quote_ranges, is_index_inside_quotes

__all__ = [
    "CompileOptions",
    "build_name_tail",
    "collect_detections",
    "compile_profile",
    "find_matches",
    "gather_patterns",
    "get_quote_ranges",
    "is_index_inside_quotes",
    "parse_pattern_entry",
]
