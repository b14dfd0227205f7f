"""Утилиты для работы с именами методов Flickr"""

from typing import List

METHOD_PREFIX = "flickr"


def normalize_segment(segment: str) -> str:
    """
    Приводит сегмент имени метода к виду для сравнения.

    Регистр и подчеркивания не учитываются, поэтому snake_case и camelCase
    варианты одного сегмента совпадают.

    Examples:
        >>> normalize_segment("getInfo")
        'getinfo'
        >>> normalize_segment("get_info")
        'getinfo'
        >>> normalize_segment("resolve_place_url")
        'resolveplaceurl'
    """
    return segment.replace("_", "").lower()


def normalize_method_name(name: str) -> str:
    """
    Нормализует полное имя метода посегментно.

    Examples:
        >>> normalize_method_name("flickr.photos.geo.getLocation")
        'flickr.photos.geo.getlocation'
        >>> normalize_method_name("flickr.stats.get_csv_files")
        'flickr.stats.getcsvfiles'
    """
    return ".".join(normalize_segment(segment) for segment in name.split("."))


def join_method_name(parts: List[str]) -> str:
    """Собирает полное имя метода из сегментов, добавляя префикс flickr"""
    if parts and parts[0] == METHOD_PREFIX:
        return ".".join(parts)
    return ".".join([METHOD_PREFIX, *parts])
