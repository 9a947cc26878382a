"""
Pytest configuration and fixtures for the Android Strings Validator tests.

Provides helpers that write Android resource trees into a temporary
directory, and the Hypothesis profile used by the property-based tests.
"""

import pytest
from hypothesis import settings, Verbosity
from lxml import etree

from android_strings_validator.config import Config
from android_strings_validator.validation.config import ValidationConfig


settings.register_profile("validation",
    max_examples=100,
    verbosity=Verbosity.normal,
    deadline=None
)
settings.load_profile("validation")


def build_resources_xml(strings=(), arrays=(), plurals=()) -> bytes:
    """
    Build the bytes of a resources XML file.

    Args:
        strings: (name, value) pairs
        arrays: (name, [item, ...]) pairs
        plurals: (name, [(quantity, value), ...]) pairs
    """
    root = etree.Element("resources")
    for name, value in strings:
        element = etree.SubElement(root, "string", name=name)
        element.text = value
    for name, items in arrays:
        element = etree.SubElement(root, "string-array", name=name)
        for item in items:
            etree.SubElement(element, "item").text = item
    for name, items in plurals:
        element = etree.SubElement(root, "plurals", name=name)
        for quantity, value in items:
            etree.SubElement(element, "item", quantity=quantity).text = value
    return etree.tostring(root, encoding="utf-8", xml_declaration=True, pretty_print=True)


@pytest.fixture
def res_dir(tmp_path):
    """An empty Android 'res' directory."""
    path = tmp_path / "res"
    path.mkdir()
    return path


@pytest.fixture
def write_resources(res_dir):
    """Factory that writes a strings file for a locale and returns its path."""
    def _write(locale="", strings=(), arrays=(), plurals=(), raw=None,
               filename=Config.DEFAULT_STRINGS_FILENAME):
        directory = res_dir / Config.values_dir(locale)
        directory.mkdir(exist_ok=True)
        path = directory / filename
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_bytes(build_resources_xml(strings, arrays, plurals))
        return path
    return _write


@pytest.fixture
def validation_config():
    """Default configuration: missing translations hidden."""
    return ValidationConfig()


@pytest.fixture
def show_missing_config():
    """Configuration that reports missing translations."""
    return ValidationConfig(show_missing=True)
