from typing import Tuple

from .. import config


def parse_folder_name(name: str) -> Tuple[str, str]:
    """
    Splits a folder name like "Heat (1995)" into (title, year).

    Folders without a "(yyyy)" suffix keep their full name as the title and
    get an Unknown year.
    """
    match = config.FOLDER_NAME_PATTERN.search(name)
    if match:
        return match.group(1).strip(), match.group(2)
    return name, config.UNKNOWN


def get_decade(year: str) -> str:
    try:
        y = int(year)
    except (TypeError, ValueError):
        return config.UNKNOWN
    return f"{y // 10 * 10}s"
