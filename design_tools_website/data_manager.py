"""Category file storage for catalog content.

Each category lives in its own `<slug>.json` file holding a JSON array of
tools. The file name stem is the canonical category identifier.
"""

import json
import logging
from pathlib import Path
from typing import Dict
from typing import List
from typing import Optional

from pydantic import TypeAdapter
from pydantic import ValidationError

from design_tools_website.config import content_dir as default_content_dir
from design_tools_website.models import Tool
from design_tools_website.seo_utils import generate_slug

logger = logging.getLogger(__name__)

_tool_list = TypeAdapter(List[Tool])


class CategoryReadError(Exception):
    """A category file exists but its contents cannot be used."""

    def __init__(self, slug: str, path: Path, reason: str) -> None:
        super().__init__(f"Could not read category {slug!r} from {path}: {reason}")
        self.slug = slug
        self.path = path
        self.reason = reason


def _resolve(content_dir: Optional[Path]) -> Path:
    return Path(content_dir) if content_dir is not None else default_content_dir()


def category_path(slug: str, content_dir: Optional[Path] = None) -> Path:
    return _resolve(content_dir) / f"{slug}.json"


def list_categories(content_dir: Optional[Path] = None) -> List[str]:
    """List category slugs, sorted, from the JSON files in the content directory."""
    directory = _resolve(content_dir)
    if not directory.is_dir():
        logger.warning(f"Tools directory not found at {directory}")
        return []
    return sorted(path.stem for path in directory.glob("*.json") if path.is_file())


def category_exists(slug: str, content_dir: Optional[Path] = None) -> bool:
    return category_path(slug, content_dir).exists()


def read_category(slug: str, content_dir: Optional[Path] = None) -> List[Tool]:
    """Load the tools of one category.

    A missing file is an empty category. A file that exists but cannot be
    parsed raises CategoryReadError so callers never overwrite it unknowingly.
    """
    path = category_path(slug, content_dir)
    if not path.exists():
        logger.info(f"No {path.name} found, starting with an empty list")
        return []

    try:
        tools = _tool_list.validate_python(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Failed to read {path}: {e}")
        raise CategoryReadError(slug, path, str(e)) from e

    logger.debug(f"Loaded {len(tools)} tools from {path.name}")
    return tools


def write_category(slug: str, tools: List[Tool], content_dir: Optional[Path] = None) -> Path:
    """Overwrite a category file with the full tool list."""
    path = category_path(slug, content_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [tool.model_dump() for tool in tools]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Saved {len(tools)} tools to {path}")
    return path


def load_catalog(content_dir: Optional[Path] = None) -> Dict[str, List[Tool]]:
    """Load every readable category, keyed by slug, skipping broken files.

    Files whose stem is not a canonical slug are left out, since no page serves them.
    """
    catalog: Dict[str, List[Tool]] = {}
    for slug in list_categories(content_dir):
        if generate_slug(slug) != slug:
            logger.warning(f"Skipping category file with non-canonical name: {slug}.json")
            continue
        try:
            catalog[slug] = read_category(slug, content_dir)
        except CategoryReadError:
            continue
    return catalog
