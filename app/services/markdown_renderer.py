import markdown

# Fenced blocks are not part of core Markdown, everything else is stock
MARKDOWN_EXTENSIONS = ["fenced_code"]


def render_markdown(source: str) -> str:
    """
    Convert a post body to HTML.
    Code spans and blocks are escaped by the converter; raw HTML written by
    the author is passed through untouched.
    """
    if not source:
        return ""
    return markdown.markdown(source, extensions=MARKDOWN_EXTENSIONS)
