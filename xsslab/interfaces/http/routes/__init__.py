# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Flask
from werkzeug.routing import BaseConverter

if TYPE_CHECKING:
    from xsslab.infrastructure.container import Container


class IdentifierConverter(BaseConverter):
    """Path segment made of letters, digits and hyphens only."""

    regex = r"[a-zA-Z0-9-]+"


def register_routes(app: Flask, container: "Container") -> None:
    # Converter must exist before any blueprint rule using <ident:...> is added.
    app.url_map.converters["ident"] = IdentifierConverter

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())
    app.register_blueprint(container.comments_controller.as_blueprint())


__all__ = ["IdentifierConverter", "register_routes"]
