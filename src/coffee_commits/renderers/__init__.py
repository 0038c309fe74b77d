"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: AlignedSeries / SeriesSummaries / floats from analysis/
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which orchestrates the rendering pipeline.

Public API:
  - charts: get_chart_config, get_comparison_chart_config,
            get_normalized_chart_config, build_charts_html
  - insights: build_insights_html, format_trend
  - build_error_html (generic "data unavailable" state)

Adding a renderer (UI module)
-----------------------------
1. Create ``renderers/{name}.py`` with a build function that calls
   ``render_template("{name}.html.j2", ...)``.
2. Create the Jinja2 template in ``templates/{name}.html.j2``. Templates
   produce HTML fragments; page CSS lives in ``templates/base.html.j2``.
3. Call it in ``flows/build.py:build_html()`` and add a placeholder to
   ``base.html.j2``.
4. Add tests asserting the returned HTML contains the expected content.
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

# Shown whenever either data source could not be loaded
DATA_UNAVAILABLE_MESSAGE = "Failed to load data from APIs. Please refresh the page and try again."


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)


def build_error_html(message: str = DATA_UNAVAILABLE_MESSAGE) -> str:
    """Render the single generic failure state."""
    return render_template("error.html.j2", message=message)
