"""Template rendering of the grouped schedule.

Templates are Jinja2 and receive a single ``locations`` variable, e.g.:

    {% for loc in locations %}
      <h2>{{ loc.location }}</h2>
      {% for day in loc.days %}
        <h3>{{ day.display_date }}</h3>
        {% for fixture in day.fixtures %}
          <p class="{{ fixture.class }}">{{ fixture.display_time }} {{ fixture.opponent }}</p>
        {% endfor %}
      {% endfor %}
    {% endfor %}
"""

from pathlib import Path
from typing import Any

import jinja2

from tgfc_fixtures.errors import RenderError, SourceReadError
from tgfc_fixtures.logging import get_logger

log = get_logger(__name__)


def load_template(path: str | Path, encoding: str = "utf-8-sig") -> str:
    """Read template source text.

    Raises:
        SourceReadError: If the file cannot be read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Unable to load template {path}: {e}") from e
    log.info("template_loaded", path=str(path), chars=len(text))
    return text


def render_schedule(
    template_text: str,
    context: dict[str, Any],
    *,
    autoescape: bool = True,
) -> str:
    """Evaluate a template against the schedule context.

    Undefined variables are errors rather than empty strings.

    Raises:
        RenderError: If the template does not compile or fails while rendering.
    """
    env = jinja2.Environment(
        autoescape=autoescape,
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )
    try:
        return env.from_string(template_text).render(context)
    except jinja2.TemplateError as e:
        raise RenderError(f"Template rendering failed: {e}") from e
