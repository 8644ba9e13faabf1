"""Abstract repository for blog posts (read-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.post import Post


class PostRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Post]:
        """Return every post, newest first as stored."""
