"""surveydata utility functions"""
from .parsing_utils import parse_names, is_name_selector, row_mask
from .text_utils import common_prefix, common_suffix


__all__ = [
    "parse_names",
    "is_name_selector",
    "row_mask",
    "common_prefix",
    "common_suffix",
]
