"""Infra de mídia local."""

from app.infra.media.file_loader import load_media_file

__all__ = ["load_media_file"]
