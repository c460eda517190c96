"""Nice language interpreter package.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from nicelang.session import Session

__version__ = "0.1.0"

__all__ = ["Session", "__version__"]
