"""atlaslint — validator for structured Atlas Markdown documents."""

from atlaslint.domain.validator import validate

__version__ = "0.1.0"

__all__ = ["__version__", "validate"]
