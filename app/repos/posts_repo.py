import json
import logging
from pathlib import Path
from typing import List, Tuple, Union

from pydantic import ValidationError

from app.errors import BlogError, MalformedContent, NotFound, UpstreamIO
from app.schemas.blog import Post
from app.utils import safe_join

logger = logging.getLogger(__name__)

POST_SUFFIX = ".json"

LoadResult = Tuple[str, Union[Post, BlogError]]


class FilePostsRepo:
    """
    Reads posts straight from the posts directory.
    Nothing is cached, so edits on disk show up on the next request.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def list_post_ids(self) -> List[str]:
        try:
            entries = list(self.root.iterdir())
        except FileNotFoundError:
            logger.warning(f"Posts directory {self.root} does not exist")
            return []
        except OSError as e:
            logger.warning(f"Posts directory {self.root} is unreadable: {e}")
            return []

        return [
            entry.name
            for entry in entries
            if entry.suffix == POST_SUFFIX and entry.is_file()
        ]

    def load_post(self, identifier: str) -> Post:
        path = safe_join(self.root, identifier)
        slug = Path(identifier).stem

        try:
            raw = path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
            raise NotFound(identifier, "post file not found")
        except UnicodeDecodeError as e:
            raise MalformedContent(identifier, f"not valid UTF-8: {e}")
        except OSError as e:
            raise UpstreamIO(identifier, f"failed to read post: {e}")

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedContent(identifier, f"invalid JSON: {e}")
        if not isinstance(payload, dict):
            raise MalformedContent(identifier, "post payload is not a JSON object")

        try:
            return Post.from_payload(payload, slug=slug)
        except ValidationError as e:
            raise MalformedContent(identifier, f"invalid post fields: {e}")

    def get_post(self, slug: str) -> Post:
        return self.load_post(f"{slug}{POST_SUFFIX}")

    def load_all_results(self) -> List[LoadResult]:
        results: List[LoadResult] = []
        for identifier in self.list_post_ids():
            try:
                results.append((identifier, self.load_post(identifier)))
            except BlogError as e:
                results.append((identifier, e))
        return results

    def load_all_posts(self) -> List[Post]:
        posts = []
        for identifier, result in self.load_all_results():
            if isinstance(result, BlogError):
                logger.warning(f"Skipping post {identifier}: {result}")
                continue
            posts.append(result)
        return posts
