"""Synthetic movement data for offline runs and tests."""

from movement_recon.generators.base import BaseGenerator
from movement_recon.generators.movements import HEADER, MovementGenerator, render_table

__all__ = ["BaseGenerator", "HEADER", "MovementGenerator", "render_table"]
