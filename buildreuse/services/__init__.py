"""Service implementations for buildreuse.

Avoid importing subpackages at module import time to prevent circular imports
from configuration loaders. Import service modules directly where needed.
"""

__all__ = []
