"""Best-effort page metadata extraction for new catalog entries.

The markup is scanned with two regular expressions rather than parsed. This is
deliberately forgiving of broken HTML, at the cost of missing titles split
across lines, meta tags with `content` before `name`, and matching tags that
sit inside HTML comments.
"""

import logging
import re
from typing import Optional

import httpx

from design_tools_website.models import ExtractedMetadata

logger = logging.getLogger(__name__)

TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
DESCRIPTION_RE = re.compile(
    r"""<meta[^>]*name=['"](description|og:description)['"][^>]*content=['"]([^'"]+)['"]""",
    re.IGNORECASE,
)


def parse_metadata(html: str) -> ExtractedMetadata:
    """Pull the first <title> and description meta tag out of raw markup."""
    title_match = TITLE_RE.search(html)
    description_match = DESCRIPTION_RE.search(html)

    title = title_match.group(1).strip() if title_match else None
    description = description_match.group(2).strip() if description_match else None

    return ExtractedMetadata(title=title or None, description=description or None)


def extract_metadata(url: str, client: Optional[httpx.Client] = None) -> ExtractedMetadata:
    """Fetch a page and extract its title and description.

    Never raises: any failure is logged and reported as empty metadata.
    """
    try:
        if client is None:
            with httpx.Client(follow_redirects=True) as owned_client:
                response = owned_client.get(url)
        else:
            response = client.get(url)
        return parse_metadata(response.text)
    except Exception as e:
        logger.warning(f"Error fetching URL {url}: {e}")
        return ExtractedMetadata.empty()
