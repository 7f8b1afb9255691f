"""
PyGame renderer for Pongish game
"""

import pygame

from pongish.utils.config import Color, GameConfig, game_config


class PygameRenderer:
    """PyGame-based renderer for Pongish"""

    def __init__(self, config: GameConfig = game_config):
        """Initialize the PyGame renderer"""
        self.config = config
        self.width = config.COURT_WIDTH
        self.height = config.COURT_HEIGHT

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Pongish")

        # Clock for controlling frame rate
        self.clock = pygame.time.Clock()

        # Colors
        self.background_color: Color = config.BACKGROUND_COLOR
        self.text_color: Color = config.TEXT_COLOR
        self.score_color: Color = config.SCORE_COLOR
        self.bat_color: Color = config.BAT_COLOR

        # Fonts for text rendering
        self.font_score = pygame.font.Font(None, 160)
        self.font_small = pygame.font.Font(None, 40)

    def clear(self) -> None:
        """Clear the screen with background color"""
        self.screen.fill(self.background_color)

    def draw_disc(self, position: tuple[float, float], color: Color, radius: float) -> None:
        """Draw one ball"""
        pos = (int(position[0]), int(position[1]))
        pygame.draw.circle(self.screen, color, pos, int(radius))

    def draw_bat(self, x: float, y: float, width: float, thickness: float) -> None:
        """Draw the bat with its face at y"""
        rect = pygame.Rect(int(x), int(y), int(width), int(thickness))
        pygame.draw.rect(self.screen, self.bat_color, rect, border_radius=4)

    def draw_score(self, points: int) -> None:
        """Draw the current score, large and dim, in the middle of the court"""
        score_surface = self.font_score.render(str(points), True, self.score_color)
        score_rect = score_surface.get_rect()
        score_rect.center = (self.width // 2, self.height // 2)
        self.screen.blit(score_surface, score_rect)

    def draw_instructions(self, lines: list[str]) -> None:
        """Draw a block of instructions in the lower half of the court"""
        for i, line in enumerate(lines):
            text_surface = self.font_small.render(line, True, self.text_color)
            self.screen.blit(text_surface, (200, self.height * 4 // 7 + i * 75))

    def present(self) -> None:
        """Update the display and cap the frame rate"""
        pygame.display.flip()
        self.clock.tick(self.config.FPS)

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        pygame.display.quit()
