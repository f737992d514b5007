# topmark:header:start
#
#   project      : TexBundle
#   file         : __init__.py
#   file_relpath : src/texbundle/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TexBundle package.

TexBundle manages named, composable configuration bundles for an extensible
TeX-style parser: handler chains per token category, fallback methods,
stack-item factories, tagging strategies and free-form options. Bundles are
kept in an explicit `BundleRegistry` and layered onto each other with
`Bundle.append`.

```python
from texbundle import Bundle, BundleRegistry

registry = BundleRegistry()
registry.create("base", handler={"macro": ["base-macros"]}, options={"strict": True})
registry.create("ams", handler={"macro": ["ams-macros"]})

session = registry.compose("base", "ams", name="session")
assert session.handler["macro"] == ["ams-macros", "base-macros"]
```
"""

from __future__ import annotations

from texbundle.bundle.model import Bundle
from texbundle.core.errors import BundleConfigError, BundleError, UnknownBundleError
from texbundle.core.handlers import HandlerType
from texbundle.registry.registry import BundleMeta, BundleRegistry

__all__ = [
    "Bundle",
    "BundleConfigError",
    "BundleError",
    "BundleMeta",
    "BundleRegistry",
    "HandlerType",
    "UnknownBundleError",
]
