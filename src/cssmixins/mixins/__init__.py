"""Mixins — functions from a configuration object to a style object."""

from __future__ import annotations

from cssmixins.mixins._base import Mixin, export_mixin
from cssmixins.mixins.radial_gradient import radial_gradient

MIXINS: dict[str, Mixin] = {
    "radial-gradient": radial_gradient,
}

__all__ = ["MIXINS", "Mixin", "export_mixin", "radial_gradient"]
