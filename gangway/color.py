from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGB color as shown on the left edge of an embed."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            component = getattr(self, name)
            if isinstance(component, bool) or not isinstance(component, int):
                raise TypeError(f"{name} must be an int, got {type(component).__name__}")
            if not 0 <= component <= 255:
                raise ValueError(f"{name} must be between 0 and 255, got {component}")

    @property
    def value(self) -> int:
        """:class:`int`: Returns the packed ``0xRRGGBB`` form Discord expects."""
        return (self.red << 16) | (self.green << 8) | self.blue

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        return cls(red, green, blue)

    @classmethod
    def from_value(cls, value: int) -> Color:
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"color value must be between 0 and 0xFFFFFF, got {value}")

        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hex(cls, code: str) -> Color:
        """Builds a color from a ``#RRGGBB`` or ``RRGGBB`` string."""
        code = code.lstrip("#")
        if len(code) != 6:
            raise ValueError(f"expected a 6 digit hex color, got {code!r}")

        return cls.from_value(int(code, 16))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"#{self.value:06x}"
