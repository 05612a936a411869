"""Pure rendering functions: panel state -> terminal text.

All renderers follow the same pattern:
  - Input: a panel state or session snapshot
  - Output: str (no trailing newline)
  - No side effects, no I/O

Used by cli.py, which prints the result.

Public API:
  - text: build_today_text, build_suggestions_text, build_tracker_line,
          build_alert_text, progress_bar
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,  # plain-text output
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name, without the trailing newline."""
    return _jinja_env.get_template(template_name).render(**kwargs).rstrip("\n")
