"""Runtime configuration for the creature animation shell."""

from __future__ import annotations
