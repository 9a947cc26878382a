"""
Android resource XML parser.

Turns a strings file (values[-locale]/strings.xml) into a ResourceDocument.
"""

import logging
from pathlib import Path
from typing import Union

from lxml import etree

from ..config import Config
from ..errors import ResourceReadError, ResourceParseError, error_handler
from ..models import (
    ResourceDocument,
    StringEntry,
    StringArrayEntry,
    PluralEntry,
    PluralItem,
)
from .locator import resource_path


logger = logging.getLogger(__name__)


def _create_resources_parser() -> etree.XMLParser:
    """Return an XML parser that never resolves external entities."""
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        dtd_validation=False,
        load_dtd=False,
        remove_comments=True,
        remove_pis=True,
        recover=False,
    )


def _text_content(element) -> str:
    """Text of an element including text nested in inline markup like <xliff:g>."""
    return "".join(element.itertext())


def parse_resources_file(path: Union[str, Path]) -> ResourceDocument:
    """
    Read and parse one resources file.

    Args:
        path: Path to the XML file

    Returns:
        ResourceDocument with the file's strings, string arrays and plurals

    Raises:
        ResourceReadError: If the file cannot be read
        ResourceParseError: If the file is not well-formed XML
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ResourceReadError(error_handler.handle_read_error(e, path)) from e

    try:
        root = etree.fromstring(data, parser=_create_resources_parser())
    except etree.XMLSyntaxError as e:
        raise ResourceParseError(error_handler.handle_parse_error(e, path)) from e

    document = ResourceDocument()
    for element in root:
        if element.tag == Config.STRING_TAG:
            document.strings.append(StringEntry(
                name=element.get(Config.NAME_ATTRIBUTE, ""),
                value=_text_content(element),
            ))
        elif element.tag == Config.STRING_ARRAY_TAG:
            document.string_arrays.append(StringArrayEntry(
                name=element.get(Config.NAME_ATTRIBUTE, ""),
                items=[_text_content(item) for item in element.iterchildren(Config.ITEM_TAG)],
            ))
        elif element.tag == Config.PLURALS_TAG:
            document.plurals.append(PluralEntry(
                name=element.get(Config.NAME_ATTRIBUTE, ""),
                items=[
                    PluralItem(
                        quantity=item.get(Config.QUANTITY_ATTRIBUTE, ""),
                        value=_text_content(item),
                    )
                    for item in element.iterchildren(Config.ITEM_TAG)
                ],
            ))

    logger.debug(
        f"Parsed {len(document.strings)} strings, {len(document.string_arrays)} string arrays "
        f"and {len(document.plurals)} plurals from {path}"
    )
    return document


def parse_resources(res_dir: Union[str, Path], locale: str, strings_filename: str) -> ResourceDocument:
    """Parse the strings file of `locale` inside `res_dir`."""
    return parse_resources_file(resource_path(res_dir, locale, strings_filename))
