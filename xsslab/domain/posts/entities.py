# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Post:
    """A post row; ``content`` is stored and returned exactly as submitted."""

    post_uuid: str
    title: str
    content: str
    time_create: int
    user_uuid: str
    username: str | None = None
    user_name: str | None = None
