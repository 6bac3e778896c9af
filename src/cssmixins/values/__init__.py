"""CSS value composition — argument lists for function-like CSS values."""

from __future__ import annotations

from cssmixins.values.builder import construct_gradient_value, css_function, join_fragments

__all__ = ["construct_gradient_value", "css_function", "join_fragments"]
