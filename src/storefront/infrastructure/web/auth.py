"""HTTP Basic guard for the admin endpoints."""

from __future__ import annotations

import secrets
from functools import wraps
from typing import Any, Callable

from flask import Response, current_app, request


def requires_admin(view: Callable[..., Any]) -> Callable[..., Any]:
    """401 with a Basic challenge when no credential is sent, 403 when it is wrong."""

    @wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        auth = request.authorization
        if auth is None or auth.type != "basic":
            return Response("Auth required", 401, {"WWW-Authenticate": "Basic"})

        settings = current_app.config["STOREFRONT_SETTINGS"]
        user_ok = secrets.compare_digest(
            (auth.username or "").encode(), settings.admin_user.encode()
        )
        pass_ok = secrets.compare_digest(
            (auth.password or "").encode(), settings.admin_pass.encode()
        )
        if not (user_ok and pass_ok):
            return Response("Forbidden", 403)
        return view(*args, **kwargs)

    return wrapper
