from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from app.schemas.blog import PostCard, PostPage
from app.settings import Settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


class PageRenderer:
    """HTML page chrome around feed cards and rendered posts."""

    def __init__(self, settings: Settings, template_dir: Path = TEMPLATES_DIR):
        self.settings = settings
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals["blog_title"] = settings.BLOG_TITLE
        self.env.globals["blog_tagline"] = settings.BLOG_TAGLINE
        self.env.globals["timezone_cookie"] = settings.TIMEZONE_COOKIE

    def feed(
        self, cards: List[PostCard], tags: List[str], active_tag: Optional[str] = None
    ) -> str:
        return self.env.get_template("feed.html").render(
            cards=cards, tags=tags, active_tag=active_tag
        )

    def post(self, page: PostPage) -> str:
        # Markdown output is already HTML; the renderer owns its escaping
        return self.env.get_template("post.html").render(
            page=page, content=Markup(page.content_html)
        )

    def not_found(self, what: str = "page") -> str:
        return self.env.get_template("not_found.html").render(what=what)

    def error(self) -> str:
        return self.env.get_template("error.html").render()
