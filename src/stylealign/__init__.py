"""Style analysis and comparison engine for personal-style rewrites."""

from stylealign.constants import APP_VERSION

__version__ = APP_VERSION
