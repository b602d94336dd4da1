from fastapi.templating import Jinja2Templates

from soundcloudfield.config import TEMPLATES_DIR

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render_fragment(name: str, **context) -> str:
    """Render an HTML fragment template (autoescaped) without a request."""
    return templates.get_template(name).render(**context).strip()


def unavailable_message(url: str) -> str:
    return render_fragment("unavailable.html", url=url)


def placeholder_markup(element_id: str) -> str:
    return render_fragment("js_embed.html", id=element_id)
