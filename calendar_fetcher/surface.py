"""
Drawing surfaces.

The renderer never touches a document directly; it produces commands and
`replay` issues them against anything implementing `DrawingSurface`.
"""

import abc
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional

from .commands import AddLayer, AddRectangle, AddText, DrawCommand
from .models import RGB
from .templating import TemplateRenderer


class DrawingSurface(abc.ABC):
    @abc.abstractmethod
    def add_layer(self, name: str) -> Any:
        ...

    @abc.abstractmethod
    def add_text(self, contents: str, left: float, top: float) -> Any:
        ...

    @abc.abstractmethod
    def set_text_style(self, text: Any, font_name: str, font_size: float, color: RGB, justification: str) -> None:
        ...

    @abc.abstractmethod
    def measure_text_width(self, text: Any) -> float:
        ...

    @abc.abstractmethod
    def move_text(self, text: Any, left: float) -> None:
        ...

    @abc.abstractmethod
    def add_rectangle(self, top: float, left: float, width: float, height: float,
                      stroke_color: RGB, stroke_width: float) -> Any:
        ...


def replay(commands: Iterable[DrawCommand], surface: DrawingSurface) -> None:
    for cmd in commands:
        if isinstance(cmd, AddLayer):
            surface.add_layer(cmd.name)
        elif isinstance(cmd, AddText):
            text = surface.add_text(cmd.contents, cmd.left, cmd.top)
            # Width depends on font and size, so style before centering
            surface.set_text_style(text, cmd.font_name, cmd.font_size, cmd.color, cmd.justification)
            if cmd.center_x is not None:
                surface.move_text(text, cmd.center_x - surface.measure_text_width(text) / 2)
        elif isinstance(cmd, AddRectangle):
            surface.add_rectangle(cmd.top, cmd.left, cmd.width, cmd.height, cmd.stroke_color, cmd.stroke_width)
        else:
            raise TypeError(f"Unknown draw command: {cmd!r}")


# --- In-memory document -------------------------------------------------------

@dataclass
class TextItem:
    contents: str
    left: float
    top: float
    font_name: str = ""
    font_size: float = 12.0
    color: RGB = (0.0, 0.0, 0.0)
    justification: str = "left"
    kind: str = "text"

    @property
    def lines(self) -> List[str]:
        return self.contents.split("\n")


@dataclass
class RectItem:
    top: float
    left: float
    width: float
    height: float
    stroke_color: RGB
    stroke_width: float = 1.0
    kind: str = "rect"


@dataclass
class Layer:
    name: str
    items: List[Any] = field(default_factory=list)


class MemorySurface(DrawingSurface):
    """
    Keeps everything drawn in plain Python objects. Text width is estimated
    from the longest line's glyph count, since no font metrics are loaded.
    """

    GLYPH_WIDTH_RATIO = 0.55

    def __init__(self):
        self.layers: List[Layer] = []
        self.active_layer: Optional[Layer] = None

    def _layer(self) -> Layer:
        if self.active_layer is None:
            self.add_layer("Layer 1")
        return self.active_layer

    def add_layer(self, name: str) -> Layer:
        layer = Layer(name)
        self.layers.append(layer)
        self.active_layer = layer
        return layer

    def add_text(self, contents: str, left: float, top: float) -> TextItem:
        item = TextItem(contents, left, top)
        self._layer().items.append(item)
        return item

    def set_text_style(self, text: TextItem, font_name: str, font_size: float, color: RGB, justification: str) -> None:
        text.font_name = font_name
        text.font_size = font_size
        text.color = tuple(color)
        text.justification = justification

    def measure_text_width(self, text: TextItem) -> float:
        longest = max((len(line) for line in text.lines), default=0)
        return longest * text.font_size * self.GLYPH_WIDTH_RATIO

    def move_text(self, text: TextItem, left: float) -> None:
        text.left = left

    def add_rectangle(self, top: float, left: float, width: float, height: float,
                      stroke_color: RGB, stroke_width: float = 1.0) -> RectItem:
        item = RectItem(top, left, width, height, tuple(stroke_color), stroke_width)
        self._layer().items.append(item)
        return item

    def texts(self) -> List[TextItem]:
        return [i for layer in self.layers for i in layer.items if i.kind == "text"]

    def rectangles(self) -> List[RectItem]:
        return [i for layer in self.layers for i in layer.items if i.kind == "rect"]


# --- SVG output ---------------------------------------------------------------

class SvgSurface(MemorySurface):
    """Memory surface that can be written out as an SVG file."""

    MARGIN = 20.0
    LINE_HEIGHT = 1.2

    def __init__(self, title: str = "Calendar", renderer: Optional[TemplateRenderer] = None):
        super().__init__()
        self.title = title
        self.renderer = renderer or TemplateRenderer()

    def _extents(self):
        xs: List[float] = []
        ys: List[float] = []
        for layer in self.layers:
            for item in layer.items:
                if item.kind == "rect":
                    xs += [item.left, item.left + item.width]
                    ys += [item.top, item.top - item.height]
                else:
                    height = item.font_size * self.LINE_HEIGHT * len(item.lines)
                    xs += [item.left, item.left + self.measure_text_width(item)]
                    ys += [item.top, item.top - height]
        if not xs:
            return 0.0, 0.0, 0.0, 0.0
        return min(xs), max(xs), min(ys), max(ys)

    def render(self) -> str:
        min_x, max_x, min_y, max_y = self._extents()
        # Document y grows upward; SVG y grows downward
        view_x = min_x - self.MARGIN
        view_y = -max_y - self.MARGIN
        width = (max_x - min_x) + 2 * self.MARGIN
        height = (max_y - min_y) + 2 * self.MARGIN
        return self.renderer.render("calendar.svg", {
            "title": self.title,
            "layers": self.layers,
            "view_box": (view_x, view_y, width, height),
            "line_height": self.LINE_HEIGHT,
        })

    def save(self, path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(), encoding="utf-8")
        return path
