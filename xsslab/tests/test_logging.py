from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from xsslab.shared.logging import sanitize_message


@pytest.mark.parametrize(
    ("raw", "leaked"),
    [
        ("Authorization: Bearer abc.def.ghi", "abc.def.ghi"),
        ("cookie auth_token=eyJhbGciOi.eyJ1dWlkIjoi.c2lnbmF0dXJl; Path=/", "c2lnbmF0dXJl"),
        ("login payload {'username': 'alice', 'password': 'hunter22'}", "hunter22"),
        ("JWT_SECRET=super-secret-value", "super-secret-value"),
        ("postgresql+psycopg://lab:pa55word@db:5432/xss", "pa55word"),
    ],
)
def test_sanitize_message_masks_credentials(raw: str, leaked: str) -> None:
    assert leaked not in sanitize_message(raw)


def test_sanitize_message_keeps_ordinary_text() -> None:
    line = "posts.create: ok post=1234 user=abcd"
    assert sanitize_message(line) == line


def test_request_id_is_echoed(client: FlaskClient) -> None:
    response = client.get("/", headers={"X-Request-ID": "trace-123"})
    assert response.headers["X-Request-ID"] == "trace-123"

    generated = client.get("/").headers["X-Request-ID"]
    assert generated and generated != "-"
