"""Shared utility helpers."""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "token_intel"


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure root logging for applications embedding the extractor.

    The ``token_intel`` logger gets the same level, so a quieter root set
    up elsewhere does not hide extraction debug lines once this has run.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        fmt = (
            '{"time":"%(asctime)s","level":"%(levelname)s",'
            '"logger":"%(name)s","message":"%(message)s"}'
        )
    else:
        fmt = "%(asctime)s | %(levelname)-8s | %(name)-32s | %(message)s"

    logging.basicConfig(
        level=numeric_level,
        format=fmt,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)


def truncate(text: str, max_len: int = 80) -> str:
    """Collapse whitespace and shorten a chat message for a one-line preview."""
    flat = " ".join(text.split())
    if len(flat) <= max_len:
        return flat
    return flat[:max_len] + "..."
