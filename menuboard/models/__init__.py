"""Application models package."""

from menuboard.models.source_snapshot import SourceSnapshot

__all__ = ["SourceSnapshot"]
