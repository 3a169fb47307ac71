"""Jinja2 environment shared by the admin pages."""
from pathlib import Path

from fastapi.templating import Jinja2Templates

from msc_admin import __version__
from msc_admin.core.config import get_settings
from msc_admin.modules.media import format_bytes

BASE_DIR = Path(__file__).resolve().parent.parent
PROJECT_ROOT = BASE_DIR.parent


def resolve_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


def _display_name(public_id: str) -> str:
    return public_id.rsplit("/", 1)[-1]


templates = Jinja2Templates(directory=str(resolve_path(get_settings().template_dir)))
templates.env.filters["format_bytes"] = format_bytes
templates.env.filters["display_name"] = _display_name
templates.env.globals["static_version"] = __version__
