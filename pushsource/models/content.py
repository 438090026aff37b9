"""Content records read from the host CMS: posts and comments.

``ContentItem`` is a closed union discriminated on ``kind``; every component
dispatches on the concrete variant instead of probing attributes.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ContentKind(str, Enum):
    """The two content variants the host reports."""

    POST = "post"
    COMMENT = "comment"


class Post(BaseModel):
    """A published post as read from the host.

    ``post_type`` is the host's content-type name (compared against the
    registry's ``post`` entity type).  The autosave and revision flags are
    derived by the host from the record itself.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["post"] = "post"
    id: int
    author_id: int = 0
    title: str = ""
    body: str = ""
    post_type: str = "post"
    is_autosave: bool = False
    is_revision: bool = False


class Comment(BaseModel):
    """A comment on a post.

    ``parent_comment_id`` is ``0`` for top-level comments.  ``author_name``
    is the free-text name stored with guest comments.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["comment"] = "comment"
    id: int
    post_id: int
    author_id: int = 0
    author_name: str = ""
    parent_comment_id: int = 0
    body: str = ""
    approved: bool | None = None


ContentItem = Annotated[Union[Post, Comment], Field(discriminator="kind")]
