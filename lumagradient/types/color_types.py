from __future__ import annotations
from typing import Tuple, Union

RGBTuple = Tuple[int, int, int]
UnitRGB = Tuple[float, float, float]
ColorInput = Union[str, RGBTuple]
