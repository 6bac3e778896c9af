"""cssmixins — CSS style objects computed from structured configuration."""

from __future__ import annotations

from cssmixins.mixins import MIXINS, radial_gradient

__version__ = "0.1.0"

__all__ = ["MIXINS", "__version__", "radial_gradient"]
