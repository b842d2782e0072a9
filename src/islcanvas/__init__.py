"""ISL canvas — interpreter for the ICFP block-canvas instruction language.

Source text is scanned into tokens, parsed into moves, and replayed against
a quadtree of rectangular blocks over an RGBA pixel buffer.
"""

from __future__ import annotations

__version__ = "1.0.0"

__all__ = ["__version__"]
