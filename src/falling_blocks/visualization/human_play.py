from __future__ import annotations

import argparse
from typing import Dict, Iterator

import pygame

from falling_blocks.game import Command, GameConfig, TetrisEngine
from .renderer import Renderer


KEY_TO_COMMAND: Dict[int, Command] = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_UP: Command.ROTATE,
    pygame.K_DOWN: Command.SOFT_DROP,
}


def poll_events(deadline_ms: int) -> Iterator[pygame.event.Event]:
    """Yield events until ``deadline_ms`` milliseconds have passed."""
    deadline = pygame.time.get_ticks() + deadline_ms
    while True:
        remaining = deadline - pygame.time.get_ticks()
        if remaining <= 0:
            return
        event = pygame.event.wait(remaining)
        if event.type == pygame.NOEVENT:
            return
        yield event


def request_quit() -> None:
    pygame.event.post(pygame.event.Event(pygame.QUIT))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play falling blocks with the keyboard")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--gravity-every", type=int, default=16, help="loop iterations per gravity tick")
    p.add_argument("--frame-ms", type=int, default=40, help="event polling deadline per frame")
    p.add_argument("--cell-size", type=int, default=20)
    return p


def run() -> None:
    args = build_parser().parse_args()
    engine = TetrisEngine(GameConfig(random_seed=args.seed))
    renderer = Renderer(cell_size=args.cell_size)

    pygame.init()
    try:
        screen = pygame.display.set_mode(renderer.window_size(engine))
        pygame.display.set_caption("Tetris")

        frames = 0
        pieces = 1
        lines = 0
        running = True
        while running:
            for event in poll_events(args.frame_ms):
                if event.type == pygame.QUIT:
                    running = False
                    break
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        request_quit()
                    elif event.key == pygame.K_r and engine.game_over:
                        engine.reset()
                    else:
                        command = KEY_TO_COMMAND.get(event.key)
                        if command is not None:
                            engine.apply(command)
            if not running:
                break

            renderer.draw(screen, engine)

            frames += 1
            if frames % args.gravity_every == 0 and not engine.game_over:
                if not engine.gravity_tick():
                    pieces += 1
                    lines += engine.last_lines_cleared
    finally:
        pygame.quit()
    print(f"Session over: {pieces} pieces, {lines} lines cleared, game over={engine.game_over}")


if __name__ == "__main__":  # pragma: no cover
    run()
