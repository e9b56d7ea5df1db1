# gui.py

from __future__ import annotations

from typing import Dict, Tuple

import pygame

from ui_state import TRAY_WIDTH, PlayState

CELL_SIZE = 28
TOP_BAR_HEIGHT = 120
MARGIN = 16
HELP_HEIGHT = 36

# Room for the largest preset (16 x 12) plus the tray.
BOARD_MAX_COLS = 16
BOARD_MAX_ROWS = 12
TRAY_ROWS = 12

GRID_ORIGIN_X = MARGIN + (TRAY_WIDTH + 1) * CELL_SIZE
GRID_ORIGIN_Y = TOP_BAR_HEIGHT + MARGIN

WINDOW_WIDTH = GRID_ORIGIN_X + BOARD_MAX_COLS * CELL_SIZE + MARGIN
WINDOW_HEIGHT = GRID_ORIGIN_Y + max(BOARD_MAX_ROWS, TRAY_ROWS) * CELL_SIZE + MARGIN + HELP_HEIGHT

# Colors – dark mode
BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
GRID = (90, 90, 95)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)
TARGET = (58, 58, 70)

STATUS_OK = (60, 200, 80)
STATUS_NG = (250, 80, 80)
LEGAL_BORDER = (235, 255, 235)
ILLEGAL_BORDER = (255, 30, 30)

PIECE_COLORS: Dict[str, Tuple[int, int, int]] = {
    "O2": (60, 200, 80),
    "I3": (45, 140, 255),
    "I4": (90, 220, 220),
    "L3": (255, 190, 60),
    "L4": (210, 145, 50),
    "T4": (190, 70, 210),
    "S4": (250, 80, 80),
    "Z4": (255, 120, 90),
    "F5": (150, 200, 60),
    "I5": (70, 170, 240),
    "L5": (230, 170, 40),
    "N5": (120, 110, 240),
    "P5": (110, 120, 255),
    "T5": (255, 160, 210),
    "U5": (200, 110, 160),
    "V5": (80, 200, 160),
    "W5": (240, 120, 50),
    "X5": (170, 90, 230),
    "Y5": (90, 180, 110),
    "Z5": (230, 90, 120),
}

HELP_TEXT = "drag: move   right-click/space: rotate   ←/→: puzzle   1-3: difficulty   S: shuffle   R: reset   H: show answer"


def cell_rect(gx: int, gy: int) -> pygame.Rect:
    return pygame.Rect(
        GRID_ORIGIN_X + gx * CELL_SIZE,
        GRID_ORIGIN_Y + gy * CELL_SIZE,
        CELL_SIZE,
        CELL_SIZE,
    )


def to_grid(mouse_pos: Tuple[int, int]) -> Tuple[float, float]:
    """Pixel position -> fractional grid coordinates (board origin at 0, 0)."""
    mx, my = mouse_pos
    return (mx - GRID_ORIGIN_X) / CELL_SIZE, (my - GRID_ORIGIN_Y) / CELL_SIZE


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    state: PlayState,
):
    pygame.draw.rect(screen, BG, (0, 0, WINDOW_WIDTH, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(16, 16, WINDOW_WIDTH - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render("Silhouette Puzzle", True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 12))

    label_surf = label_font.render(state.label(), True, TEXT_MAIN)
    label_x = card_rect.right - label_surf.get_width() - 20
    screen.blit(label_surf, (label_x, card_rect.y + 12))

    if state.result is None:
        color = TEXT_SECONDARY
    else:
        color = STATUS_OK if state.solved else STATUS_NG
    status_surf = label_font.render(state.status_text(), True, color)
    screen.blit(status_surf, (card_rect.x + 20, card_rect.y + 48))


def draw_board(screen: pygame.Surface, state: PlayState):
    """Grid lines, the target silhouette, then every piece in arrangement order."""
    puzzle = state.puzzle

    for gx, gy in puzzle.target:
        rect = cell_rect(gx, gy)
        pygame.draw.rect(screen, TARGET, rect)

    # Grid
    left = GRID_ORIGIN_X
    top = GRID_ORIGIN_Y
    right = left + puzzle.board_w * CELL_SIZE
    bottom = top + puzzle.board_h * CELL_SIZE
    for c in range(puzzle.board_w + 1):
        x = left + c * CELL_SIZE
        pygame.draw.line(screen, GRID, (x, top), (x, bottom))
    for r in range(puzzle.board_h + 1):
        y = top + r * CELL_SIZE
        pygame.draw.line(screen, GRID, (left, y), (right, y))

    for instance_id, placement in state.arrangement.items():
        color = PIECE_COLORS.get(placement.piece, TEXT_SECONDARY)
        legal = state.is_legal(instance_id)
        for gx, gy in placement.cells:
            rect = cell_rect(gx, gy).inflate(-2, -2)
            pygame.draw.rect(screen, color, rect, border_radius=6)
            if legal is not None:
                border = LEGAL_BORDER if legal else ILLEGAL_BORDER
                pygame.draw.rect(screen, border, rect, width=2, border_radius=6)

    if state.solved:
        board_rect = pygame.Rect(left, top, right - left, bottom - top)
        glow_surf = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        pygame.draw.rect(glow_surf, (50, 255, 80, 255), board_rect, border_radius=8, width=3)
        pygame.draw.rect(glow_surf, (50, 255, 80, 60), board_rect.inflate(8, 8), border_radius=12, width=4)
        screen.blit(glow_surf, (0, 0))


def draw_help(screen: pygame.Surface, body_font: pygame.font.Font):
    surf = body_font.render(HELP_TEXT, True, GRID)
    screen.blit(surf, (MARGIN, WINDOW_HEIGHT - HELP_HEIGHT + 8))


def draw_play_screen(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    body_font: pygame.font.Font,
    state: PlayState,
):
    screen.fill(BG)
    draw_top_bar(screen, title_font, label_font, state)
    draw_board(screen, state)
    draw_help(screen, body_font)
