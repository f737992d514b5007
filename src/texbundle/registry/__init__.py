# topmark:header:start
#
#   project      : TexBundle
#   file         : __init__.py
#   file_relpath : src/texbundle/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundle registry and its machine-readable views.

```python
from texbundle.registry import BundleRegistry

registry = BundleRegistry()
registry.create("base", handler={"macro": ["base-macros"]})
assert registry.lookup("missing") is None
```
"""

from __future__ import annotations

from .registry import BundleMeta, BundleRegistry

__all__ = [
    "BundleMeta",
    "BundleRegistry",
]
