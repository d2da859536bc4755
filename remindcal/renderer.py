import typer
from jinja2 import Environment, FileSystemLoader, StrictUndefined
from pathlib import Path

TEMPLATE_DIR = Path(__file__).parent / "templates"

class ReportRenderer:
    def __init__(self, template_dir: Path = TEMPLATE_DIR, color: bool = True):
        self.color = color
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        # plain text output, so no html escaping
        self.env.filters["colorize"] = self.colorize

    def colorize(self, text: str, color: str) -> str:
        if not self.color:
            return text
        return typer.style(text, fg=color)

    def render(self, template_name: str, context: dict) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)
