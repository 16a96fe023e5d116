from jinja2 import Environment, FileSystemLoader, select_autoescape
from pathlib import Path
from typing import Sequence

TEMPLATE_DIR = Path(__file__).parent / "templates"


def rgb_css(color: Sequence[float]) -> str:
    r, g, b = (int(round(c)) for c in color[:3])
    return f"rgb({r},{g},{b})"


def fmt_num(value: float) -> str:
    return f"{value:g}"


class TemplateRenderer:
    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "svg"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["rgb"] = rgb_css
        self.env.filters["num"] = fmt_num

    def render(self, template_name: str, context: dict) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)
