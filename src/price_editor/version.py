"""Single source of truth for the price-editor version string."""

__version__: str = "0.1.0"
