"""Runtime configuration, read from the environment.

A ``.env`` file in the working directory is loaded first; variables
already set in the environment win.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    upload_dir: Path = _DEFAULT_DATA_DIR / "uploads"
    cart_file: Path = _DEFAULT_DATA_DIR / "local_storage.json"
    api_url: str = ""
    admin_user: str = "admin"
    admin_pass: str = "changeme"
    stripe_secret_key: str = ""
    currency: str = "usd"
    checkout_success_url: str = "https://example.com/success"
    checkout_cancel_url: str = "https://example.com/cancel"
    port: int = 3000
    log_level: str = "INFO"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def posts_file(self) -> Path:
        return self.data_dir / "posts.json"

    @property
    def payments_configured(self) -> bool:
        return bool(self.stripe_secret_key)

    @staticmethod
    def from_env() -> Settings:
        load_dotenv(find_dotenv(usecwd=True))
        data_dir = Path(os.getenv("STOREFRONT_DATA_DIR") or _DEFAULT_DATA_DIR)
        return Settings(
            data_dir=data_dir,
            upload_dir=Path(os.getenv("STOREFRONT_UPLOAD_DIR") or data_dir / "uploads"),
            cart_file=Path(os.getenv("STOREFRONT_CART_FILE") or data_dir / "local_storage.json"),
            api_url=os.getenv("STOREFRONT_API_URL", ""),
            admin_user=os.getenv("ADMIN_USER") or "admin",
            admin_pass=os.getenv("ADMIN_PASS") or "changeme",
            stripe_secret_key=os.getenv("STRIPE_SECRET_KEY", ""),
            currency=os.getenv("STOREFRONT_CURRENCY") or "usd",
            checkout_success_url=os.getenv("CHECKOUT_SUCCESS_URL") or "https://example.com/success",
            checkout_cancel_url=os.getenv("CHECKOUT_CANCEL_URL") or "https://example.com/cancel",
            port=int(os.getenv("PORT") or 3000),
            log_level=os.getenv("STOREFRONT_LOG_LEVEL") or "INFO",
        )
