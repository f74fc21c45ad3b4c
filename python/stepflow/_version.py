"""Version helpers for stepflow."""
from importlib.metadata import PackageNotFoundError, version

__version__ = "0.1.0"
try:
    __version__ = version("stepflow")
except PackageNotFoundError:  # pragma: no cover - fallback for source checkouts.
    pass

__all__ = ["__version__"]
