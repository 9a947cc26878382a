"""
Configuration settings for the Android Strings Validator.
"""


class Config:
    """Configuration class for application settings."""

    # Resource layout settings
    DEFAULT_STRINGS_FILENAME = "strings.xml"
    VALUES_DIR_NAME = "values"
    VALUES_DIR_PREFIX = "values-"

    # Resource XML node names
    STRING_TAG = "string"
    STRING_ARRAY_TAG = "string-array"
    PLURALS_TAG = "plurals"
    ITEM_TAG = "item"
    NAME_ATTRIBUTE = "name"
    QUANTITY_ATTRIBUTE = "quantity"

    # Logging settings
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    @classmethod
    def values_dir(cls, locale: str) -> str:
        """Return the values directory name for a locale ("" means the default locale)."""
        if locale:
            return f"{cls.VALUES_DIR_PREFIX}{locale}"
        return cls.VALUES_DIR_NAME
