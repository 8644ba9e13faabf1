"""Flask application exposing the storefront HTTP API."""

from __future__ import annotations

import logging
import time

import stripe
from flask import Flask, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException
from werkzeug.utils import secure_filename

from storefront.application.catalog_records import product_to_record
from storefront.application.create_checkout_session import (
    CreateCheckoutSessionHandler,
    checkout_items_from_payload,
)
from storefront.application.payment_gateway import PaymentGateway
from storefront.application.rate_product import RateProductHandler
from storefront.application.replace_catalog import ReplaceCatalogHandler
from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    UpstreamUnconfiguredError,
    ValidationError,
)
from storefront.domain.repository.post_repository import PostRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure import bootstrap
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.json_post_repository import JsonPostRepository
from storefront.infrastructure.web.auth import requires_admin

logger = logging.getLogger(__name__)

_USE_SETTINGS = object()


def create_app(
    settings: Settings | None = None,
    product_repo: ProductRepository | None = None,
    post_repo: PostRepository | None = None,
    gateway: PaymentGateway | None | object = _USE_SETTINGS,
) -> Flask:
    """Build the app; collaborators default to the ones *settings* describe."""
    settings = settings or Settings.from_env()
    product_repo = product_repo or bootstrap.product_repository(settings)
    post_repo = post_repo or bootstrap.post_repository(settings)
    if gateway is _USE_SETTINGS:
        gateway = bootstrap.payment_gateway(settings)

    app = Flask(__name__)
    app.config["STOREFRONT_SETTINGS"] = settings
    app.config["MAX_CONTENT_LENGTH"] = 10 * 1024 * 1024

    upload_dir = settings.upload_dir
    upload_dir.mkdir(parents=True, exist_ok=True)

    # -------------------------
    # Error handling
    # -------------------------
    @app.errorhandler(ValidationError)
    def handle_validation(exc: ValidationError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(EntityNotFoundError)
    def handle_not_found(exc: EntityNotFoundError):
        return jsonify({"error": str(exc)}), 404

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error."}), 500

    # -------------------------
    # Catalog
    # -------------------------
    @app.get("/api/products")
    def list_products():
        return jsonify([product_to_record(p) for p in product_repo.list_all()])

    @app.get("/api/admin/products")
    @requires_admin
    def admin_list_products():
        return jsonify([product_to_record(p) for p in product_repo.list_all()])

    @app.post("/api/admin/products")
    @requires_admin
    def admin_save_products():
        count = ReplaceCatalogHandler(product_repo).handle(request.get_json(silent=True))
        return jsonify({"ok": True, "count": count})

    @app.post("/api/admin/upload")
    @requires_admin
    def admin_upload():
        file = request.files.get("image")
        if file is None or not file.filename:
            return jsonify({"error": "No file uploaded"}), 400

        safe = secure_filename(file.filename) or "upload"
        filename = f"{int(time.time() * 1000)}-{safe}"
        file.save(upload_dir / filename)
        logger.info("Stored upload %s", filename)
        return jsonify({"ok": True, "url": f"/uploads/{filename}"})

    @app.get("/uploads/<path:filename>")
    def uploads(filename: str):
        return send_from_directory(upload_dir, filename)

    # -------------------------
    # Blog posts
    # -------------------------
    @app.get("/api/posts")
    def list_posts():
        return jsonify([JsonPostRepository.to_raw(p) for p in post_repo.list_all()])

    # -------------------------
    # Ratings
    # -------------------------
    @app.post("/api/products/<product_id>/rate")
    def rate_product(product_id: str):
        payload = request.get_json(silent=True)
        rating = payload.get("rating") if isinstance(payload, dict) else None
        product = RateProductHandler(product_repo).handle(product_id, rating)
        return jsonify({"success": True, "product": product_to_record(product)})

    # -------------------------
    # Checkout
    # -------------------------
    @app.post("/api/create-checkout-session")
    def create_checkout_session():
        handler = CreateCheckoutSessionHandler(product_repo, gateway, settings.currency)
        try:
            handler.ensure_configured()
            items = checkout_items_from_payload(request.get_json(silent=True))
            url = handler.handle(items)
        except UpstreamUnconfiguredError as exc:
            return jsonify({"error": str(exc)}), 500
        except ValidationError:
            raise
        except (DomainException, stripe.StripeError) as exc:
            logger.error("Checkout failed: %s", exc)
            return jsonify({"error": "Failed to create checkout session."}), 500
        return jsonify({"url": url})

    return app
