"""
Renderer protocol - defines interface for different rendering backends
"""

from typing import Protocol

Color = tuple[int, int, int]


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The core only ever asks for discs, the bat and the score; everything
    else (fonts, windows, frame pacing) belongs to the backend.
    """

    def clear(self) -> None:
        """Clear the frame with the background color"""
        ...

    def draw_disc(self, position: tuple[float, float], color: Color, radius: float) -> None:
        """
        Draw one ball.

        Args:
            position: Centre of the disc
            color: RGB color
            radius: Disc radius in pixels
        """
        ...

    def draw_bat(self, x: float, y: float, width: float, thickness: float) -> None:
        """
        Draw the bat.

        Args:
            x: Left end of the bat face
            y: Vertical position of the bat face
            width: Bat face width
            thickness: Bat thickness below the face
        """
        ...

    def draw_score(self, points: int) -> None:
        """Draw the current score"""
        ...

    def draw_instructions(self, lines: list[str]) -> None:
        """Draw a block of instruction text"""
        ...

    def present(self) -> None:
        """Show the finished frame"""
        ...
