"""
Android Strings Validator.

Checks translated Android string resources against the base locale.
"""

__version__ = "0.1.0"
