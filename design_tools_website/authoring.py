"""Interactive flows for adding categories and tools to the catalog.

Both flows return None when they finish and a `Cancelled` marker when the
operator backs out, so only the command decides how the process ends.
"""

import logging
from pathlib import Path
from typing import Callable
from typing import List
from typing import Optional
from typing import Union

from design_tools_website.data_manager import CategoryReadError
from design_tools_website.data_manager import category_exists
from design_tools_website.data_manager import list_categories
from design_tools_website.data_manager import read_category
from design_tools_website.data_manager import write_category
from design_tools_website.models import ExtractedMetadata
from design_tools_website.models import Tool
from design_tools_website.page_metadata import extract_metadata
from design_tools_website.prompts import Cancelled
from design_tools_website.prompts import Prompter
from design_tools_website.prompts import chain
from design_tools_website.prompts import comma_separated_tags
from design_tools_website.prompts import is_cancelled
from design_tools_website.prompts import min_length
from design_tools_website.prompts import required
from design_tools_website.prompts import sluggable
from design_tools_website.prompts import valid_url
from design_tools_website.seo_utils import category_title
from design_tools_website.seo_utils import generate_slug
from design_tools_website.seo_utils import preview_text

logger = logging.getLogger(__name__)

FlowResult = Optional[Cancelled]
Extractor = Callable[[str], ExtractedMetadata]


def create_category(
    prompter: Prompter,
    content_dir: Optional[Path] = None,
    extract: Optional[Extractor] = None,
) -> FlowResult:
    """Create an empty category file, optionally moving straight on to adding tools."""
    name = prompter.text(
        "What is the name of the new tool category?",
        validate=chain(
            required("Category name is required"),
            min_length(2, "Category name must be at least 2 characters"),
            sluggable("Category name must contain letters or digits"),
        ),
        placeholder="Color Tools, Icons, etc.",
    )
    if is_cancelled(name):
        return name

    slug = generate_slug(name)
    if category_exists(slug, content_dir):
        overwrite = prompter.confirm(f'Category "{name}" already exists. Overwrite?')
        if is_cancelled(overwrite) or not overwrite:
            return Cancelled()

    write_category(slug, [], content_dir)
    prompter.success(f"Created new category: {name} ({slug}.json)")

    add_now = prompter.confirm("Would you like to add a tool to this category now?")
    if is_cancelled(add_now):
        return add_now
    if add_now:
        return add_tool(prompter, slug, content_dir=content_dir, extract=extract)
    return None


def _choose_category(prompter: Prompter, content_dir: Optional[Path]) -> Union[str, Cancelled, None]:
    categories = list_categories(content_dir)
    if not categories:
        prompter.error("No tool categories found. Create a category first.")
        return None
    return prompter.select(
        "Select a category to add the tool to:",
        [(slug, category_title(slug)) for slug in categories],
    )


def _resolve_field(
    prompter: Prompter,
    extracted: Optional[str],
    label: str,
    validate: Callable[[str], str],
    shown: Optional[str] = None,
):
    """Offer an extracted value for confirmation, or fall back to manual entry."""
    if not extracted:
        return prompter.text(f"Could not extract the tool {label}. Please enter it manually:", validate=validate)

    use_extracted = prompter.confirm(f'Use extracted {label}: "{shown}"?')
    if is_cancelled(use_extracted):
        return use_extracted
    if use_extracted:
        return extracted
    return prompter.text(f"Enter the tool {label}:", validate=validate)


def _prompt_tool(prompter: Prompter, extract: Extractor) -> Union[Tool, Cancelled]:
    url = prompter.text("Enter the tool URL:", validate=valid_url, placeholder="https://example.com")
    if is_cancelled(url):
        return url

    prompter.info("Fetching information from URL...")
    metadata = extract(url)
    # A title made only of punctuation cannot become a slug
    title = metadata.title if metadata.title and generate_slug(metadata.title) else None

    name = _resolve_field(
        prompter,
        title,
        "name",
        chain(required("Tool name is required"), sluggable("Tool name must contain letters or digits")),
        shown=title,
    )
    if is_cancelled(name):
        return name

    description = _resolve_field(
        prompter,
        metadata.description,
        "description",
        required("Description is required"),
        shown=preview_text(metadata.description or ""),
    )
    if is_cancelled(description):
        return description

    tags = prompter.text(
        "Enter tags (comma-separated):",
        validate=comma_separated_tags,
        placeholder="design, colors, palette",
    )
    if is_cancelled(tags):
        return tags

    return Tool(name=name, slug=generate_slug(name), description=description, url=url, tags=tags)


def _load_for_update(prompter: Prompter, category: str, content_dir: Optional[Path]) -> Union[List[Tool], Cancelled]:
    try:
        return read_category(category, content_dir)
    except CategoryReadError as e:
        prompter.warn(f"Could not read existing category file: {e.reason}")
        discard = prompter.confirm(
            f"Discard the unreadable contents of {e.path.name} and start a new list?",
            default=False,
        )
        if is_cancelled(discard) or not discard:
            return Cancelled()
        logger.warning(f"Discarding unreadable category file {e.path}")
        return []


def add_tool(
    prompter: Prompter,
    category: Optional[str] = None,
    content_dir: Optional[Path] = None,
    extract: Optional[Extractor] = None,
) -> FlowResult:
    """Add tools one at a time until the operator stops."""
    extract = extract or extract_metadata
    while True:
        selected = category or _choose_category(prompter, content_dir)
        if selected is None or is_cancelled(selected):
            return selected

        tool = _prompt_tool(prompter, extract)
        if is_cancelled(tool):
            return tool

        tools = _load_for_update(prompter, selected, content_dir)
        if is_cancelled(tools):
            return tools

        if any(existing.slug == tool.slug for existing in tools):
            overwrite = prompter.confirm(f'A tool with slug "{tool.slug}" already exists. Overwrite?')
            if is_cancelled(overwrite) or not overwrite:
                return Cancelled()
            tools = [existing for existing in tools if existing.slug != tool.slug]

        tools.append(tool)
        write_category(selected, tools, content_dir)
        prompter.success(f'Added tool "{tool.name}" to {selected} category')

        another = prompter.confirm("Would you like to add another tool?")
        if is_cancelled(another):
            return another
        if not another:
            return None

        # The next tool may go to a different category
        category = None
