"""Top-level package for vsdown.

Installs, checks and removes the Visual Studio Code release tarball.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("vsdown")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
