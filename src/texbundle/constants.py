# topmark:header:start
#
#   project      : TexBundle
#   file         : constants.py
#   file_relpath : src/texbundle/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TexBundle Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TEXBUNDLE_VERSION: str = get_version("texbundle")

# Tool name reported in machine output envelopes.
TEXBUNDLE_TOOL_NAME: str = "texbundle"

# Environment variable consulted by `texbundle.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: str = "TEXBUNDLE_LOG_LEVEL"

# Placeholder used by text renderers for empty facets.
VALUE_NOT_SET: str = "<not set>"
