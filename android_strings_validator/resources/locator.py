"""
Locale file discovery inside an Android 'res' directory.
"""

import glob
import logging
from pathlib import Path
from typing import List, Tuple, Union

from ..config import Config
from ..errors import ResourceReadError, error_handler


logger = logging.getLogger(__name__)


def values_dir(locale: str) -> str:
    """Directory name holding the resources of `locale` ("values" for the default locale)."""
    return Config.values_dir(locale)


def resource_path(res_dir: Union[str, Path], locale: str, strings_filename: str) -> Path:
    """Path of the strings file for `locale`."""
    return Path(res_dir) / values_dir(locale) / strings_filename


def find_other_strings_files(
    res_dir: Union[str, Path], except_for_locale: str, strings_filename: str
) -> List[Path]:
    """
    Find the strings files of every locale except `except_for_locale`.

    Localized files (values-*/) come first, sorted by path, followed by the
    default values/ file when it exists. The file of `except_for_locale` is
    removed from the result. Every match is listed, including paths that
    are not readable files, so read failures surface when they are parsed.

    Args:
        res_dir: Path to the Android 'res' directory
        except_for_locale: Locale whose file is left out (usually the base locale)
        strings_filename: Name of the XML strings file (e.g. "strings.xml")

    Returns:
        List of paths to the other strings files

    Raises:
        ResourceReadError: If `res_dir` cannot be read as a directory
    """
    res_dir = Path(res_dir)
    try:
        next(res_dir.iterdir(), None)
    except OSError as e:
        raise ResourceReadError(error_handler.handle_read_error(e, res_dir)) from e

    pattern = f"{Config.VALUES_DIR_PREFIX}*/{glob.escape(strings_filename)}"
    paths = sorted(res_dir.glob(pattern))

    default_path = res_dir / Config.VALUES_DIR_NAME / strings_filename
    if default_path.exists():
        paths.append(default_path)

    except_for_path = resource_path(res_dir, except_for_locale, strings_filename)
    if except_for_path in paths:
        paths.remove(except_for_path)

    logger.debug(f"Found {len(paths)} strings files to validate in {res_dir}")
    return paths


def enumerate_locale_files(
    res_dir: Union[str, Path], base_locale: str, strings_filename: str
) -> Tuple[Path, List[Path]]:
    """Return the base strings file path and the paths of all other locales' files."""
    return (
        resource_path(res_dir, base_locale, strings_filename),
        find_other_strings_files(res_dir, base_locale, strings_filename),
    )


def extract_short_path(res_dir: Union[str, Path], strings_file_path: Union[str, Path]) -> str:
    """
    Display path of a strings file relative to `res_dir` (e.g. "values-de/strings.xml").

    Falls back to the full path when it is not inside `res_dir`.
    """
    try:
        return Path(strings_file_path).relative_to(res_dir).as_posix()
    except ValueError:
        return str(strings_file_path)
