"""Puzzle terminals and activation blocks placed in the world."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .geometry import Rect

HITBOX_WIDTH = 72
HITBOX_HEIGHT = 130
HINT_OFFSET_X = -50
HINT_OFFSET_Y = -30
FINAL_PUZZLE_INDEX = 3
BLOCK_COUNT = 4

TERMINAL_TEXTURE = "assets/puzzles/terminal.png"
CIRCUIT_TEXTURE = "assets/puzzles/circuito.png"
BLOCK_TEXTURE_PATTERN = "assets/puzzles/blocos/{}.png"

PUZZLE_TEXTURES = {1: TERMINAL_TEXTURE, 2: CIRCUIT_TEXTURE, 4: TERMINAL_TEXTURE}

ANALYTIC_RANGE = (3850, 3950)
EMPATHY_RANGE = (5010, 5110)
ANALYTIC_PROMPT = "Módulo Analítico - pressione [E] para ativar"
EMPATHY_PROMPT = "Módulo de Empatia - pressione [E] para ativar"
MODULE_PHASE = 3


@dataclass
class Puzzle:
    """A puzzle terminal belonging to one phase."""

    phase: int
    x: float
    y: float
    solved: bool = False
    answer: str | None = None
    question: str | None = None
    texture: str | None = None

    @property
    def hitbox(self) -> Rect:
        return Rect(self.x, self.y, HITBOX_WIDTH, HITBOX_HEIGHT)

    @property
    def hint_position(self) -> tuple[float, float]:
        return (self.x + HINT_OFFSET_X, self.y + HINT_OFFSET_Y)


@dataclass
class Block:
    """An activation block the player gathers for the final puzzle."""

    num: int
    x: float
    y: float
    collected: bool = False
    texture: str | None = None

    @property
    def hitbox(self) -> Rect:
        return Rect(self.x, self.y, HITBOX_WIDTH, HITBOX_HEIGHT)

    @property
    def hint_position(self) -> tuple[float, float]:
        return (self.x + HINT_OFFSET_X, self.y + HINT_OFFSET_Y)


def _default_puzzles() -> list[Puzzle]:
    return [
        Puzzle(1, 1095, 290),
        Puzzle(2, 3800, 310),
        Puzzle(3, 0, 800),
        Puzzle(4, 10470, 300),
    ]


def _default_blocks() -> list[Block]:
    positions = [(2230, 330), (6700, 280), (7452, 300), (9030, 300)]
    return [
        Block(num, x, y, texture=BLOCK_TEXTURE_PATTERN.format(num))
        for num, (x, y) in enumerate(positions)
    ]


@dataclass
class PuzzleBoard:
    """The puzzles and blocks of the world and which of them is in use."""

    puzzles: list[Puzzle] = field(default_factory=_default_puzzles)
    blocks: list[Block] = field(default_factory=_default_blocks)
    current: Puzzle = field(default_factory=lambda: Puzzle(0, 0.0, 0.0))
    current_block: Block | None = None
    active: bool = False
    block_active: bool = False

    def init_puzzle(self, phase: int) -> None:
        """Make a fresh copy of the puzzle of ``phase`` the current one."""
        if not 1 <= phase <= len(self.puzzles):
            raise ValueError(f"no such phase: {phase}")
        self.current = replace(self.puzzles[phase - 1])
        texture = PUZZLE_TEXTURES.get(phase)
        if texture is not None:
            self.current.texture = texture
        self.active = False

    def check_collision(self, hitbox: Rect, interact: bool, phase: int) -> bool:
        """Open the current puzzle when touched and ``interact`` is set."""
        if hitbox.collides(self.current.hitbox) and interact:
            if not self.current.solved:
                self.init_puzzle(phase)
            self.active = True
            return True
        return False

    def check_final_collision(self, hitbox: Rect, interact: bool, phase: int) -> bool:
        """Open the final puzzle when touched and ``interact`` is set."""
        final = self.puzzles[FINAL_PUZZLE_INDEX]
        if hitbox.collides(final.hitbox) and interact:
            if not final.solved:
                self.init_puzzle(phase)
            self.active = True
            return True
        return False

    def check_block_collisions(self, hitbox: Rect, collect: bool) -> bool:
        """Track the touched block and start collecting it when ``collect`` is set."""
        for block in self.blocks:
            if hitbox.collides(block.hitbox):
                self.current_block = block
                if collect:
                    self.block_active = True
                    return True
        return False

    def check_module_triggers(self, player_x: float, phase: int, activate: bool) -> list[str]:
        """Offer the phase-3 modules near ``player_x``; returns the prompts to show."""
        prompts: list[str] = []
        if phase != MODULE_PHASE or self.active:
            return prompts
        for (low, high), prompt in ((ANALYTIC_RANGE, ANALYTIC_PROMPT), (EMPATHY_RANGE, EMPATHY_PROMPT)):
            if low <= player_x <= high:
                prompts.append(prompt)
                if activate:
                    self.init_puzzle(MODULE_PHASE)
                    self.active = True
        return prompts

    def collect_block(self, num: int) -> None:
        """Mark block ``num`` as collected."""
        if not 0 <= num < len(self.blocks):
            raise ValueError(f"no such block: {num}")
        self.blocks[num].collected = True

    def all_blocks_collected(self) -> bool:
        return all(block.collected for block in self.blocks)