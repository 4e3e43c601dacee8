"""Game window, main loop and the inventory panel."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .config import SCREEN_HEIGHT, SCREEN_WIDTH, TARGET_FPS, WINDOW_TITLE
from .fragments import CATALOGUE, MemoryFragment
from .graphics import wrap_text

LINE_HEIGHT = 25
FRAGMENT_GAP = 10
SCROLL_STEP = 25
INVENTORY_MARGIN = 30
FONT_SIZE = 20


def clamp_scroll(offset: int, content_height: int, area_height: int) -> int:
    """Limit ``offset`` between the bottom of the content and the top."""
    lower = min(area_height - content_height, 0)
    return max(min(offset, 0), lower)


@dataclass
class Inventory:
    """The scrollable list of collected fragments."""

    open: bool = False
    scroll_offset: int = 0

    def content_height(
        self,
        fragments: Iterable[MemoryFragment],
        width: float,
        measure: Callable[[str], float],
    ) -> int:
        """Height of all fragment headers, wrapped lines and gaps."""
        total = 0
        for fragment in fragments:
            total += LINE_HEIGHT
            lines = [line for line in wrap_text(fragment.content, width, measure).split("\n") if line]
            total += LINE_HEIGHT * len(lines)
            total += FRAGMENT_GAP
        return total

    def scroll(self, delta: int, content_height: int, area_height: int) -> int:
        """Move by ``delta`` and clamp; returns the new offset."""
        self.scroll_offset = clamp_scroll(self.scroll_offset + delta, content_height, area_height)
        return self.scroll_offset


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run the loop."""
    parser = argparse.ArgumentParser(prog="sint7")
    parser.add_argument("--skip-ai", action="store_true", help="do not run the fragment generator")
    args = parser.parse_args(argv)

    import pygame

    from .ai import AIError, run_ai
    from .camera import Camera
    from .fragments import FragmentStore
    from .game import check_collisions
    from .graphics import DarkOverlay
    from .menu import Menu, MenuState
    from .phase import start_phase
    from .player import Player
    from .puzzle_setup import PuzzleBoard

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, FONT_SIZE + 4)

    player = Player()
    camera = Camera.for_player(player)
    fragments = FragmentStore()
    board = PuzzleBoard()
    start_phase(player, fragments, board)
    menu = Menu()
    overlay = DarkOverlay()
    inventory = Inventory()

    if not args.skip_ai:
        try:
            run_ai()
        except AIError as exc:
            print(exc)
    for content, feeling in CATALOGUE:
        print(f"$IA: Conteúdo: {content} | Sentimento: {feeling.name}")

    key_names = {pygame.K_i: "i", pygame.K_c: "c", pygame.K_RETURN: "enter", pygame.K_x: "x", pygame.K_e: "e"}
    running = True
    while running:
        dt = clock.tick(TARGET_FPS) / 1000.0
        pressed: set[str] = set()
        clicked = enter = escape = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                clicked = True
            elif event.type == pygame.KEYDOWN:
                if event.key in key_names:
                    pressed.add(key_names[event.key])
                enter |= event.key == pygame.K_RETURN
                escape |= event.key == pygame.K_ESCAPE
                if event.key == pygame.K_i and inventory.open:
                    pass
                if inventory.open and event.key in (pygame.K_UP, pygame.K_DOWN):
                    delta = SCROLL_STEP if event.key == pygame.K_UP else -SCROLL_STEP
                    height = inventory.content_height(
                        fragments.collected, SCREEN_WIDTH - 2 * INVENTORY_MARGIN,
                        lambda s: font.size(s)[0],
                    )
                    inventory.scroll(delta, height, SCREEN_HEIGHT - 60)
                if event.key == pygame.K_TAB:
                    inventory.open = not inventory.open
                    overlay.set_open(inventory.open)

        result = menu.update(dt, pygame.mouse.get_pos(), clicked, enter, escape)
        if result == "quit":
            running = False
        elif result == "start":
            player = Player()
            camera = Camera.for_player(player)

        screen.fill((0, 0, 0))
        if menu.state is MenuState.PLAYING:
            held = pygame.key.get_pressed()
            player.update(dt, held[pygame.K_RIGHT], held[pygame.K_LEFT])
            camera.follow(player)
        if menu.state in (MenuState.PLAYING, MenuState.PAUSED):
            offset_x = camera.target_x - camera.offset_x
            collisions = check_collisions(player, board, fragments, pressed, pygame.time.get_ticks() / 1000.0)
            for hx, hy, text in collisions.hints:
                screen.blit(font.render(text, True, (0, 228, 48)), (hx - offset_x, hy))
            hb = player.hitbox()
            pygame.draw.rect(screen, (200, 200, 200), (hb.x - offset_x, hb.y, hb.width, hb.height))
            overlay.update(dt)
            if overlay.visible:
                shade = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
                shade.fill((0, 0, 0, int(overlay.alpha)))
                screen.blit(shade, (0, 0))
            if inventory.open:
                y = 50 + inventory.scroll_offset
                for number, fragment in enumerate(fragments.collected, start=1):
                    screen.blit(font.render(f"FM-00{number}:", True, (0, 217, 224)), (40, y))
                    y += LINE_HEIGHT
                    text = wrap_text(fragment.content, SCREEN_WIDTH - 2 * INVENTORY_MARGIN, lambda s: font.size(s)[0])
                    for line in filter(None, text.split("\n")):
                        screen.blit(font.render(line, True, (255, 255, 255)), (50, y))
                        y += LINE_HEIGHT
                    y += FRAGMENT_GAP
        if menu.state is not MenuState.PLAYING:
            label = {MenuState.MAIN: "Jogar / Sair", MenuState.PAUSED: "PAUSADO"}.get(menu.state)
            if menu.state is MenuState.LORE:
                screen.blit(font.render(menu.story.split("\n")[0], True, (255, 255, 255)), (50, 50))
            if label:
                screen.blit(font.render(label, True, (255, 255, 255)), (SCREEN_WIDTH // 2 - 60, SCREEN_HEIGHT // 2))
        pygame.display.flip()

    pygame.quit()
    return 0