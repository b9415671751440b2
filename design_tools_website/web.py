import logging
from pathlib import Path
from typing import List
from typing import Optional

from dotenv import load_dotenv
from fasthtml.common import H1
from fasthtml.common import H2
from fasthtml.common import A
from fasthtml.common import Body
from fasthtml.common import Div
from fasthtml.common import Head
from fasthtml.common import Html
from fasthtml.common import Input
from fasthtml.common import Li
from fasthtml.common import Meta
from fasthtml.common import P
from fasthtml.common import Script
from fasthtml.common import Span
from fasthtml.common import StyleX
from fasthtml.common import Title
from fasthtml.common import Ul
from fasthtml.common import to_xml
from fasthtml.fastapp import fast_app
from starlette.responses import HTMLResponse

from design_tools_website.config import base_path
from design_tools_website.config import web_port
from design_tools_website.data_manager import CategoryReadError
from design_tools_website.data_manager import list_categories
from design_tools_website.data_manager import load_catalog
from design_tools_website.data_manager import read_category
from design_tools_website.models import Tool
from design_tools_website.seo_utils import category_heading
from design_tools_website.seo_utils import generate_slug
from design_tools_website.seo_utils import preview_text

load_dotenv()

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def url(path: str) -> str:
    """Prefix path with BASE_PATH for subdirectory deployment"""
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base_path()}{path}"


def get_category_tools(category_slug: str) -> Optional[List[Tool]]:
    """Tools for a category, or None when it is unknown or unreadable"""
    # Only canonical slugs map to files, which also keeps path segments out of the lookup
    if generate_slug(category_slug) != category_slug or category_slug not in list_categories():
        return None
    try:
        return read_category(category_slug)
    except CategoryReadError:
        return None


def find_tool(tools: List[Tool], slug: str) -> Optional[Tool]:
    for tool in tools:
        if tool.slug == slug:
            return tool
    return None


def page(title: str, description: str, *content):
    return Html(
        Head(
            Title(title),
            Meta({"charset": "utf-8"}),
            Meta({"name": "viewport", "content": "width=device-width, initial-scale=1"}),
            Meta({"name": "description", "content": description}),
            StyleX(str(STATIC_DIR / "styles.css")),
        ),
        Body(Div(*content, _class="main-window")),
    )


def not_found(title: str, message: str) -> HTMLResponse:
    body = page(title, message, H1(title), P(message), A("← Back to All Categories", href=url("/")))
    return HTMLResponse(to_xml(body), status_code=404)


# Components
def tag_list(tags: List[str]):
    return Div(*[Span(tag, _class="tag") for tag in tags], _class="tags")


def tool_item(category_slug: str, tool: Tool):
    """Tool list entry, carrying the lowercase text the search script matches on"""
    return Li(
        A(
            H2(tool.name),
            P(tool.description),
            tag_list(tool.tags),
            href=url(f"/{category_slug}/{tool.slug}"),
        ),
        _class="tool-item",
        **{
            "data-name": tool.name.lower(),
            "data-description": tool.description.lower(),
            "data-tags": " ".join(tool.tags).lower(),
        },
    )


# App setup
app, rt = fast_app(static_path=str(STATIC_DIR))


@rt("/")
def get():
    catalog = load_catalog()
    return page(
        "Design Tools",
        "Browse our collection of design tools by category.",
        H1("Design Tools"),
        P("Browse our collection of design tools by category:"),
        Ul(
            *[
                Li(
                    A(H2(category_heading(slug)), href=url(f"/{slug}")),
                    Span(f"{len(tools)} tools", _class="count"),
                )
                for slug, tools in catalog.items()
            ],
            _class="categories",
        ),
    )


@rt("/health")
def health():
    return {"status": "ok"}


@rt("/{category_slug}")
def get_category_page(category_slug: str):
    tools = get_category_tools(category_slug)
    if tools is None:
        return not_found("Category Not Found", f"No category found: {category_slug}")

    heading = category_heading(category_slug)
    return page(
        heading,
        f"A collection of {len(tools)} {heading.lower()}.",
        H1(heading),
        Input({"type": "search", "id": "search-input", "placeholder": "Search tools..."}),
        Ul(*[tool_item(category_slug, tool) for tool in tools], _class="tools"),
        P("No tools match your search.", id="no-results", style="display: none"),
        Div(A("← Back to All Categories", href=url("/")), _class="back-link"),
        Script(src=url("/search.js")),
    )


@rt("/{category_slug}/{slug}")
def get_tool_page(category_slug: str, slug: str):
    tools = get_category_tools(category_slug)
    tool = find_tool(tools, slug) if tools is not None else None
    if tool is None:
        return not_found("Tool Not Found", f"No tool found with slug: {slug}")

    heading = category_heading(category_slug)
    return page(
        tool.name,
        preview_text(tool.description, 160),
        H1(tool.name),
        P(tool.description),
        A("Visit Tool →", href=tool.url, target="_blank", rel="noopener noreferrer", _class="cta-button"),
        Div(P("Tags:", _class="tags-label"), tag_list(tool.tags), _class="tool-tags"),
        Div(A(f"← Back to {heading}", href=url(f"/{category_slug}")), _class="back-link"),
    )


# For direct script execution
if __name__ == "__main__":
    import uvicorn

    from design_tools_website.logging_config import setup_logging

    setup_logging()
    port = web_port()
    print(f"Starting server on port {port}")
    uvicorn.run("design_tools_website.web:app", host="0.0.0.0", port=port, reload=True)
