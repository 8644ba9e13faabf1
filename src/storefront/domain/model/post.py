"""Blog post shown on the storefront home page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Post:
    title: str
    date: str = ""
    excerpt: str = ""
    extra: dict[str, Any] = field(default_factory=dict)
