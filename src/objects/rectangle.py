"""Rectangle record with a derived area."""

from pydantic import BaseModel, ConfigDict


class Rectangle(BaseModel):
    """Width/height pair. Frozen, so area() never goes stale."""

    model_config = ConfigDict(frozen=True)

    width: int | float
    height: int | float

    def area(self) -> int | float:
        return self.width * self.height


def make_rectangle(width: int | float, height: int | float) -> Rectangle:
    return Rectangle(width=width, height=height)
