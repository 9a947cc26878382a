"""
Resources module for locating and parsing Android string resource files.
"""

from .locator import (
    values_dir,
    resource_path,
    find_other_strings_files,
    enumerate_locale_files,
    extract_short_path,
)
from .parser import parse_resources, parse_resources_file

__all__ = [
    'values_dir',
    'resource_path',
    'find_other_strings_files',
    'enumerate_locale_files',
    'extract_short_path',
    'parse_resources',
    'parse_resources_file'
]
