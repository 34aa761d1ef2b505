"""price-editor — interactive terminal editor for a fixed price list.

Select entries, apply a percentage increase, and regenerate the
price listing source file.
"""

from price_editor.version import __version__

__all__: list[str] = ["__version__"]
