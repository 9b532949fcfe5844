"""Pygame-based board renderer that doubles as a command source for mouse and key input."""

import time

try:
    from Board import SIDE, BLOCKED, RED, BLUE
except ImportError:
    from Battle_Ataxx_AI.Board import SIDE, BLOCKED, RED, BLUE

# Keys that stand for whole commands.
KEY_COMMANDS = {
    "s": "start",
    "p": "pass",
    "c": "clear",
    "d": "dump",
    "h": "help",
    "q": "quit",
}


def square_at(pos, origin, tile_size, side=SIDE):
    """
    Map a pixel position to a square name like 'c4', or None when the position
    falls outside the board. origin is the pixel position of the top-left
    corner of a7; row 7 is drawn at the top.
    """
    mx, my = pos
    ox, oy = origin
    if mx < ox or my < oy:
        return None
    c = int((mx - ox) // tile_size)
    r = int((my - oy) // tile_size)
    if not (0 <= c < side and 0 <= r < side):
        return None
    return f"{chr(ord('a') + c)}{side - r}"


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_SQUARE = (209, 179, 135)
    COLOR_GRID = (60, 40, 20)
    COLOR_BLOCK = (90, 90, 90)
    COLOR_RED = (200, 30, 30)
    COLOR_BLUE = (30, 60, 200)
    COLOR_SELECT = (240, 220, 60)
    COLOR_TEXT = (230, 230, 230)

    PANEL_HEIGHT = 80

    def __init__(self, window_size=640):
        import pygame

        self.window_size = window_size
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size))
        pygame.display.set_caption("Ataxx Battle")

        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)

        board_display_size = window_size - self.PANEL_HEIGHT
        self.tile_size = board_display_size // SIDE
        self.board_origin = (
            (window_size - self.tile_size * SIDE) // 2,
            self.PANEL_HEIGHT + (board_display_size - self.tile_size * SIDE) // 2,
        )

        self._selected = None
        self._last = None

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _square_rect(self, c, r):
        ox, oy = self.board_origin
        return self._pygame.Rect(
            ox + c * self.tile_size,
            oy + (SIDE - 1 - r) * self.tile_size,
            self.tile_size,
            self.tile_size,
        )

    def _draw_squares(self, board):
        pygame = self._pygame
        for r in range(SIDE):
            for c in range(SIDE):
                rect = self._square_rect(c, r)
                value = board.get(chr(ord("a") + c), chr(ord("1") + r))
                fill = self.COLOR_BLOCK if value is BLOCKED else self.COLOR_SQUARE
                pygame.draw.rect(self.screen, fill, rect)
                pygame.draw.rect(self.screen, self.COLOR_GRID, rect, 1)
                if value.is_piece():
                    piece = self.COLOR_RED if value is RED else self.COLOR_BLUE
                    pygame.draw.circle(self.screen, piece, rect.center, self.tile_size * 0.4)

    def _draw_selection(self):
        if not self._selected:
            return
        c = ord(self._selected[0]) - ord("a")
        r = ord(self._selected[1]) - ord("1")
        self._pygame.draw.rect(self.screen, self.COLOR_SELECT, self._square_rect(c, r), 3)

    def _draw_info_panel(self, current_player_color, game_result):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)

        if game_result is not None:
            msg = "Draw" if game_result == "Draw" else f"{game_result} Wins!"
            self._draw_text(msg, self.font_large, self.COLOR_TEXT, (self.window_size / 2, self.PANEL_HEIGHT / 2))
        else:
            msg = f"{current_player_color} to move"
            self._draw_text(msg, self.font_medium, self.COLOR_TEXT, (self.window_size / 2, self.PANEL_HEIGHT / 2))

    def render(self, board, last_move=None, current_player_color=None, game_result=None):
        self._last = (board, last_move, current_player_color, game_result)
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_squares(board)
        self._draw_selection()
        self._draw_info_panel(current_player_color, game_result)
        self._pygame.display.flip()

    def read_line(self, prompt):
        """
        Block until the user produces a command: two clicked squares make a
        move token, single keys make commands. Closing the window quits.
        """
        pygame = self._pygame
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return "quit"
                if event.type == pygame.KEYDOWN:
                    command = KEY_COMMANDS.get(event.unicode.lower())
                    if command:
                        self._selected = None
                        return command
                if event.type == pygame.MOUSEBUTTONDOWN:
                    square = square_at(event.pos, self.board_origin, self.tile_size)
                    if square is None:
                        continue
                    if self._selected is None:
                        self._selected = square
                    else:
                        token = f"{self._selected}-{square}"
                        self._selected = None
                        return token
                    if self._last:
                        self.render(*self._last)

            pygame.time.delay(10)

    def close(self):
        # Leave the final position up briefly before tearing down the window.
        time.sleep(1)
        self._pygame.quit()
