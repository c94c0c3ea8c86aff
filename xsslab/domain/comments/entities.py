# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Comment:

    comment_id: str
    content: str
    user_uuid: str
    post_uuid: str
    username: str | None = None
    user_name: str | None = None
    post_title: str | None = None
