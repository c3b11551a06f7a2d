"""Public file server package.

Exposes the installed distribution version as ``__version__``.
"""
from importlib.metadata import PackageNotFoundError, version

try:  # Resolves once the project is installed; otherwise default.
    __version__ = version("public-file-server")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
