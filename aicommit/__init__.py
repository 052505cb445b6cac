"""ai-commit: AI-assisted Git commit message tool."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ai-commit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
