"""Pure rendering functions: serialized forecast -> HTML strings.

All renderers follow the same pattern:
  - Input: the JSON-ready dict from ``analysis.serialization``
  - Output: str (HTML fragment or page)
  - No side effects, no I/O, no Prefect decorators

Colors and icons come from the serialized output; renderers never reach
back into the scoring engine. Used by flows/build.py.

Public API:
  - bite_forecast: build_bite_forecast_html, build_species_cards
  - date_utils: format_time_window, format_hour

Adding a renderer
-----------------
1. Create ``renderers/{name}.py`` with a build function that calls
   ``render_template("{name}.html.j2", ...)``.
2. Create the template in ``templates/{name}.html.j2``.
3. Wire it into ``build_html()`` in ``flows/build.py``.
4. Add tests that assert the returned HTML contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
