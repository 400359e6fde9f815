"""
css_assist
==========

Does: Root package for CSS editing support: color conversion (hex ↔ HSL) and
      swatches, vocabulary-driven token classification and completion, and
      collision-safe whitespace compaction.
Used by: Host editor integrations and the `css-assist` CLI.
"""

__all__: list[str] = []
__version__ = "0.1.0"
__docformat__ = "google"
