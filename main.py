from __future__ import annotations

import argparse
import logging

from board import PUZZLES_PER_TIER, Difficulty, GenerationMode
from export import write_export_json
from generator import GenerationExhausted, generate_all

log = logging.getLogger(__name__)

DIFFICULTY_KEYS = {
    "1": Difficulty.EASY,
    "2": Difficulty.MEDIUM,
    "3": Difficulty.HARD,
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Silhouette packing puzzles")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GenerationMode],
        default=GenerationMode.FREE.value,
        help="free: scattered pieces, connected: one touching silhouette",
    )
    parser.add_argument("--seed", type=int, default=None, help="override the per-tier base seeds")
    parser.add_argument("--count", type=int, default=PUZZLES_PER_TIER, help="puzzles per difficulty")
    parser.add_argument("--export", metavar="PATH", help="write the batch as JSON and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def run_ui(batches, mode: GenerationMode) -> None:
    import pygame

    from gui import WINDOW_WIDTH, WINDOW_HEIGHT, draw_play_screen, to_grid
    from ui_state import PlayState

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption("Silhouette Puzzle")

    # Fonts
    title_font = pygame.font.SysFont("SF Pro Display", 32, bold=True)
    label_font = pygame.font.SysFont("SF Pro Text", 22)
    body_font = pygame.font.SysFont("SF Pro Text", 16)

    clock = pygame.time.Clock()
    state = PlayState(batches, mode)

    running = True
    while running:
        clock.tick(60)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.MOUSEBUTTONDOWN:
                pos = to_grid(event.pos)
                if event.button == 1:
                    state.begin_drag(pos)
                elif event.button == 3:
                    target = state.piece_at(pos)
                    if target is not None:
                        state.rotate_piece(target)

            elif event.type == pygame.MOUSEMOTION:
                if state.drag is not None:
                    state.drag_to(to_grid(event.pos))

            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button == 1:
                    state.end_drag()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_RIGHT:
                    state.next_puzzle()
                elif event.key == pygame.K_LEFT:
                    state.prev_puzzle()
                elif event.key == pygame.K_s:
                    state.shuffle_order()
                elif event.key == pygame.K_r:
                    state.reset()
                elif event.key == pygame.K_h:
                    state.reveal_solution()
                elif event.key == pygame.K_SPACE:
                    target = state.piece_at(to_grid(pygame.mouse.get_pos()))
                    if target is not None:
                        state.rotate_piece(target)
                elif event.unicode in DIFFICULTY_KEYS:
                    state.set_difficulty(DIFFICULTY_KEYS[event.unicode])

        draw_play_screen(screen, title_font, label_font, body_font, state)
        pygame.display.flip()

    pygame.quit()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mode = GenerationMode(args.mode)

    try:
        batches = generate_all(mode, count=args.count, seed=args.seed)
    except GenerationExhausted as exc:
        log.error("%s", exc)
        return 1

    if args.export:
        write_export_json(args.export, batches, mode)
        return 0

    run_ui(batches, mode)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
