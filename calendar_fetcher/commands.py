from pydantic import BaseModel, ConfigDict
from typing import Literal, Optional, Union

from .models import RGB


class AddLayer(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["layer"] = "layer"
    name: str


class AddText(BaseModel):
    """
    Point text. When center_x is set the surface measures the styled text and
    moves it so its horizontal midpoint sits on center_x.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    contents: str
    left: float
    top: float
    font_name: str
    font_size: float
    color: RGB
    justification: Literal["left", "center"] = "left"
    center_x: Optional[float] = None


class AddRectangle(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rectangle"] = "rectangle"
    top: float
    left: float
    width: float
    height: float
    stroke_color: RGB
    stroke_width: float = 1.0


DrawCommand = Union[AddLayer, AddText, AddRectangle]
