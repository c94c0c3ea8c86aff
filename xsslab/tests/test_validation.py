from __future__ import annotations

from xsslab.shared.validation import (
    FieldSpec,
    custom,
    email,
    format_errors,
    max_length,
    min_length,
    required,
    validate,
    validate_create_comment,
    validate_create_post,
    validate_login,
    validate_pagination,
    validate_register,
    validate_search_query,
    validate_uuid,
)


def test_register_reports_every_failing_field_in_order() -> None:
    result = validate_register({"username": "ab", "password": "12345", "name": "Alice"})

    assert result.valid is False
    assert result.errors == [
        "Username must be at least 3 characters",
        "Password must be at least 6 characters",
    ]


def test_validators_are_idempotent() -> None:
    payload = {"username": "a b", "password": "", "name": "x" * 101}
    assert validate_register(payload).errors == validate_register(payload).errors


def test_register_accepts_valid_payload() -> None:
    result = validate_register({"username": "alice_1-x", "password": "password1", "name": "Alice"})
    assert result.valid is True
    assert result.errors == []


def test_register_rejects_username_characters() -> None:
    result = validate_register({"username": "ali ce", "password": "password1", "name": "Alice"})
    assert result.errors == [
        "Username can only contain letters, numbers, underscores and hyphens"
    ]


def test_missing_fields_collect_required_errors() -> None:
    assert validate_login({}).errors == ["Username is required", "Password is required"]
    assert validate_create_post({"title": ""}).errors == [
        "Title is required",
        "Title cannot be empty",
        "Content is required",
    ]
    assert validate_create_comment({"content": "hi"}).errors == ["Post UUID is required"]


def test_length_bounds() -> None:
    assert validate_create_post({"title": "t" * 200, "content": "c" * 10000}).valid
    assert validate_create_post({"title": "t" * 201, "content": "c"}).errors == [
        "Title must be at most 200 characters"
    ]
    assert validate_create_comment({"content": "c" * 1001, "post_uuid": "p"}).errors == [
        "Content must be at most 1000 characters"
    ]
    assert validate_search_query("q" * 101).errors == [
        "Search query must be at most 100 characters"
    ]


def test_empty_search_query_is_rejected() -> None:
    result = validate_search_query("")
    assert not result.valid
    assert result.errors[0] == "Search query is required"


def test_length_rules_skip_non_strings() -> None:
    result = validate([FieldSpec("count", 5, [required(), min_length(3), max_length(4)])])
    assert result.valid


def test_default_messages_use_field_name() -> None:
    result = validate(
        [
            FieldSpec("nickname", "", [required()]),
            FieldSpec("contact", "nope", [email()]),
            FieldSpec("age", 3, [custom(lambda v: v > 10)]),
        ]
    )
    assert result.errors == [
        "nickname is required",
        "contact must be a valid email",
        "age validation failed",
    ]
    assert format_errors(result) == (
        "nickname is required; contact must be a valid email; age validation failed"
    )


def test_pagination_and_uuid_validators() -> None:
    assert validate_pagination(20, 0).valid
    assert validate_pagination(0, -1).errors == [
        "Limit must be a positive number",
        "Offset must be a non-negative number",
    ]
    assert validate_pagination(101).errors == ["Limit must be at most 100"]

    assert validate_uuid("123e4567-e89b-12d3-a456-426614174000").valid
    assert validate_uuid("not-a-uuid").errors == ["Invalid UUID format"]
