"""``pushsource replay``: run recorded host events through the push source.

The events file is a JSON fixture describing the host state (users, post
titles, taxonomy terms, stored comments) and the ordered hook calls to
replay.  Every accepted event is shown with its message and targets.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal, Optional

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.table import Table

from pushsource.config import config
from pushsource.core.in_memory import (
    InMemoryCommentStore,
    InMemoryPostTitles,
    InMemoryTaxonomy,
    InMemoryUserDirectory,
)
from pushsource.core.hook_bus import HookBus
from pushsource.models.content import Comment, Post
from pushsource.models.delivery import Delivery
from pushsource.routing.dispatcher import DeliveryDispatcher
from pushsource.routing.sinks.local_file import LocalFileSink
from pushsource.source import COMMENT_HOOK, POST_HOOK, PushSource

console = Console()


class TermAssignment(BaseModel):
    object_id: int
    taxonomy: str
    term_ids: list[int]


class PostInsert(BaseModel):
    hook: Literal["insert_post"]
    post: Post
    updating: bool = False
    rest_request: bool = False


class CommentInsert(BaseModel):
    hook: Literal["insert_comment"]
    comment_id: int
    comment_data: dict[str, Any] = {}
    rest_request: bool = False


class ReplayFixture(BaseModel):
    """Host state plus the hook calls to replay, in order."""

    users: dict[int, str] = {}
    titles: dict[int, str] = {}
    terms: list[TermAssignment] = []
    failing_taxonomy: list[int] = []
    comments: list[Comment] = []
    events: list[PostInsert | CommentInsert] = []


class _RecordingSink:
    sink_name = "recorder"

    def __init__(self) -> None:
        self.deliveries: list[Delivery] = []

    def accept(self, delivery: Delivery) -> None:
        self.deliveries.append(delivery)


def load_fixture(path: Path) -> ReplayFixture:
    """Parse and validate a replay fixture file."""
    return ReplayFixture.model_validate(json.loads(path.read_text(encoding="utf-8")))


def replay_fixture(
    fixture: ReplayFixture, output: Path | None = None
) -> list[Delivery]:
    """Replay every event in *fixture* and return the resulting deliveries."""
    titles = InMemoryPostTitles(fixture.titles)
    for event in fixture.events:
        if isinstance(event, PostInsert) and event.post.id not in fixture.titles:
            titles.add(event.post.id, event.post.title)

    taxonomy = InMemoryTaxonomy(failing=set(fixture.failing_taxonomy))
    for assignment in fixture.terms:
        taxonomy.assign(assignment.object_id, assignment.taxonomy, assignment.term_ids)

    recorder = _RecordingSink()
    delivery = DeliveryDispatcher()
    delivery.add_sink(recorder)
    if output is not None:
        delivery.add_sink(LocalFileSink(output))

    source = PushSource.from_config(
        config,
        directory=InMemoryUserDirectory(fixture.users),
        taxonomy=taxonomy,
        titles=titles,
        comments=InMemoryCommentStore(fixture.comments),
        sink=delivery,
    )
    bus = HookBus()
    source.register(bus)

    for event in fixture.events:
        if isinstance(event, PostInsert):
            bus.emit(
                POST_HOOK,
                event.post.id,
                event.post,
                event.updating,
                rest_request=event.rest_request,
            )
        else:
            bus.emit(
                COMMENT_HOOK,
                event.comment_id,
                event.comment_data,
                rest_request=event.rest_request,
            )

    return recorder.deliveries


def replay_cmd(
    events_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="JSON fixture with host state and events to replay.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write each delivery as JSON under this directory.",
    ),
) -> None:
    """Replay recorded host events and show the resulting deliveries."""
    try:
        fixture = load_fixture(events_file)
    except (json.JSONDecodeError, ValidationError) as exc:
        console.print(f"[red]Invalid events file:[/red] {exc}")
        raise typer.Exit(code=1)

    deliveries = replay_fixture(fixture, output)

    table = Table(title=f"Deliveries ({len(deliveries)}/{len(fixture.events)} events)")
    table.add_column("Type", style="cyan")
    table.add_column("ID", justify="right")
    table.add_column("User", style="green")
    table.add_column("Title")
    table.add_column("Content")
    table.add_column("Targets", style="magenta")

    for d in deliveries:
        m = d.message
        table.add_row(
            d.object_type,
            str(m.id),
            m.username,
            m.title or m.post_title or "",
            m.content,
            ", ".join(t.topic for t in d.targets) or "[dim]none[/dim]",
        )

    console.print(table)
