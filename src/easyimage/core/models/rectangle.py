"""
Module: rectangle

Purpose:
    Provides the Rectangle dataclass - an axis-aligned integer region used
    both as a destination surface region and as a source sampling window.

Key Functions:
    - Rectangle.from_size(width, height): Rectangle anchored at the origin
    - Rectangle.contains(x, y): Check if a pixel is inside the region
    - Rectangle.is_within(width, height): Check containment in an extent
    - Rectangle.as_tuple(): (x, y, width, height)
    - Rectangle.as_box(): (left, top, right, bottom) for PIL

Dependencies:
    - dataclasses (std)
    - core.errors: InvalidGeometryError

Used By:
    - resampling.resampler: Destination rectangle and sampling window
    - transforms.crop: Crop window
    - transforms.resize: Full-extent window
"""

from __future__ import annotations

from dataclasses import dataclass

from easyimage.core.errors import InvalidGeometryError


@dataclass(frozen=True, slots=True)
class Rectangle:
    """
    Axis-aligned region in pixels.

    The region covers [x, x + width) x [y, y + height). The origin may
    be negative or lie outside a raster; only the extent is validated
    here, callers decide where a rectangle is allowed to sit.

    Attributes:
        x: Left edge (inclusive)
        y: Top edge (inclusive)
        width: Horizontal extent in pixels
        height: Vertical extent in pixels

    Invariants:
        - width >= 0
        - height >= 0

    Example:
        >>> window = Rectangle(50, 20, 140, 75)
        >>> window.right, window.bottom
        (190, 95)
        >>> Rectangle(0, 0, -1, 10)
        Traceback (most recent call last):
        ...
        easyimage.core.errors.InvalidGeometryError: width must be >= 0: -1
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate extent on construction."""
        if self.width < 0:
            raise InvalidGeometryError(f"width must be >= 0: {self.width}")
        if self.height < 0:
            raise InvalidGeometryError(f"height must be >= 0: {self.height}")

    @classmethod
    def from_size(cls, width: int, height: int) -> Rectangle:
        """Rectangle of the given size anchored at (0, 0)."""
        return cls(0, 0, width, height)

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> int:
        """X-coordinate of the right edge (exclusive)."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Y-coordinate of the bottom edge (exclusive)."""
        return self.y + self.height

    @property
    def area(self) -> int:
        """Number of pixels covered."""
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        """True when the region covers no pixels."""
        return self.width == 0 or self.height == 0

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) tuple."""
        return (self.width, self.height)

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def contains(self, x: int, y: int) -> bool:
        """
        Check if a pixel coordinate is within this region.

        Args:
            x: X-coordinate to check
            y: Y-coordinate to check

        Returns:
            True if x <= px < right and y <= py < bottom
        """
        return self.x <= x < self.right and self.y <= y < self.bottom

    def is_within(self, width: int, height: int) -> bool:
        """
        Check if the whole region lies inside a [0, width) x [0, height) extent.

        Args:
            width: Width of the containing extent
            height: Height of the containing extent

        Returns:
            True if no pixel of this region falls outside the extent
        """
        return (
            self.x >= 0
            and self.y >= 0
            and self.right <= width
            and self.bottom <= height
        )

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Get as (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)

    def as_box(self) -> tuple[int, int, int, int]:
        """Get as (left, top, right, bottom) tuple for PIL."""
        return (self.x, self.y, self.right, self.bottom)

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Rectangle({self.x}, {self.y}, {self.width}, {self.height})"
