"""Fetch the spreadsheet export, falling back to stored or bundled copies."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import httpx
from pydantic import BaseModel, ConfigDict
from sqlalchemy import select
from sqlalchemy.orm import Session

from menuboard.models.source_snapshot import SourceSnapshot

logger = logging.getLogger(__name__)

ORIGIN_REMOTE: str = "remote"
ORIGIN_SNAPSHOT: str = "snapshot"
ORIGIN_FALLBACK_FILE: str = "fallback_file"
SNAPSHOTS_TO_KEEP: int = 5


class DataSourceError(Exception):
    """No copy of the spreadsheet could be obtained."""


class SourceText(BaseModel):
    """Spreadsheet export text and where it came from."""

    text: str
    origin: str
    using_fallback: bool

    model_config = ConfigDict(frozen=True)


def fetch_remote_text(url: str, timeout: float, client: httpx.Client | None = None) -> str:
    """GET the export with a cache-busting ``t`` parameter."""
    request_url = httpx.URL(url).copy_add_param("t", str(int(time.time() * 1000)))
    if client is not None:
        response = client.get(request_url, timeout=timeout, follow_redirects=True)
    else:
        response = httpx.get(request_url, timeout=timeout, follow_redirects=True)
    response.raise_for_status()
    return response.text


def latest_snapshot(db: Session) -> SourceSnapshot | None:
    return db.scalars(
        select(SourceSnapshot).order_by(SourceSnapshot.fetched_at.desc(), SourceSnapshot.id.desc()).limit(1)
    ).first()


def save_snapshot(db: Session, url: str, text: str) -> SourceSnapshot:
    """Store a fetched export and prune all but the newest snapshots."""
    snapshot = SourceSnapshot(source_url=url, content=text, content_length=len(text))
    db.add(snapshot)
    db.flush()

    stale = db.scalars(
        select(SourceSnapshot)
        .order_by(SourceSnapshot.fetched_at.desc(), SourceSnapshot.id.desc())
        .offset(SNAPSHOTS_TO_KEEP)
    ).all()
    for row in stale:
        db.delete(row)
    db.commit()
    return snapshot


def fetch_source_text(
    db: Session,
    url: str,
    fallback_path: str | Path,
    timeout: float = 10.0,
    client: httpx.Client | None = None,
) -> SourceText:
    """Return the freshest available export.

    Order: remote URL, newest stored snapshot, bundled fallback file.
    """
    if url:
        try:
            text = fetch_remote_text(url, timeout, client=client)
        except httpx.HTTPError as exc:
            logger.warning("[SOURCE] Remote menu fetch failed (%s); falling back", exc)
        else:
            if text.strip():
                save_snapshot(db, url, text)
                return SourceText(text=text, origin=ORIGIN_REMOTE, using_fallback=False)
            logger.warning("[SOURCE] Remote menu export from %s is empty; falling back", url)
    else:
        logger.info("[SOURCE] No menu URL configured; using local copies")

    snapshot = latest_snapshot(db)
    if snapshot is not None:
        logger.info("[SOURCE] Using snapshot fetched at %s", snapshot.fetched_at)
        return SourceText(text=snapshot.content, origin=ORIGIN_SNAPSHOT, using_fallback=True)

    path = Path(fallback_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataSourceError(f"No menu data available: remote, snapshot and {path} all failed") from exc
    logger.info("[SOURCE] Using bundled fallback file %s", path)
    return SourceText(text=text, origin=ORIGIN_FALLBACK_FILE, using_fallback=True)
