"""JSON-file-backed implementation of PostRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.exceptions import StorageError
from storefront.domain.model.post import Post
from storefront.domain.repository.post_repository import PostRepository


class JsonPostRepository(PostRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def list_all(self) -> list[Post]:
        if not self._file_path.exists():
            return []
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read posts {self._file_path}: {exc}") from exc
        return [self._to_domain(raw) for raw in data if isinstance(raw, dict)]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Post:
        return Post(
            title=str(raw.get("title") or ""),
            date=str(raw.get("date") or ""),
            excerpt=str(raw.get("excerpt") or ""),
            extra={k: v for k, v in raw.items() if k not in ("title", "date", "excerpt")},
        )

    @staticmethod
    def to_raw(post: Post) -> dict:
        return {"date": post.date, "title": post.title, "excerpt": post.excerpt, **post.extra}
