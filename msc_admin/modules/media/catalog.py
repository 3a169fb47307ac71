"""Folder-scoped filtering of an already fetched asset list."""

from __future__ import annotations

from typing import Iterable

from .models import Asset


def asset_in_folder(asset: Asset, folder: str) -> bool:
    """Return True when ``asset`` belongs to ``folder``.

    The vendor is inconsistent about which assets carry an explicit folder
    attribute, so membership is tried in order: exact folder attribute,
    folder attribute prefix, identifier prefix, then identifier substring.
    The substring check also matches a nested folder with the same name
    (``archive/team/x`` is listed under ``team``).
    """
    if not folder:
        return True
    asset_folder = asset.folder or ""
    public_id = asset.public_id
    return (
        asset_folder == folder
        or asset_folder.startswith(folder + "/")
        or public_id.startswith(folder + "/")
        or ("/" + folder + "/") in public_id
    )


def matches_search(asset: Asset, query: str) -> bool:
    return query.lower() in asset.public_id.lower()


def filter_assets(assets: Iterable[Asset], folder: str = "", query: str = "") -> list[Asset]:
    return [
        asset
        for asset in assets
        if matches_search(asset, query) and asset_in_folder(asset, folder)
    ]


def format_bytes(size: int) -> str:
    if size <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{round(value, 2):g} {units[index]}"


__all__ = ["asset_in_folder", "filter_assets", "format_bytes", "matches_search"]
