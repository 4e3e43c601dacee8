"""Memory fragments: where they lie, collecting them and the collected log."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace

from .config import NUM_FRAGMENTS
from .geometry import Rect

FRAGMENT_HITBOX_WIDTH = 32
FRAGMENT_HITBOX_HEIGHT = 120
ACTIVE_SECONDS = 5.0
HINT_OFFSET_X = 10
HINT_OFFSET_Y = -30

REQUIRED_TEXTURE_PATTERN = "assets/fragmentos/background-frag/obrigatorios/{:03d}.png"
REQUIRED_TRIGGER_PATTERN = "assets/fragmentos/trigger-frag/obrigatorios/{:03d}.png"
OPTIONAL_TEXTURE = "assets/fragmentos/background-frag/bg-opc.png"
OPTIONAL_TRIGGER_PATTERN = "assets/fragmentos/trigger-frag/opcionais/{:03d}.png"


class Feeling(enum.Enum):
    OBEDIENCE = enum.auto()
    EMPATHY = enum.auto()
    AUTONOMY = enum.auto()
    REVOLT = enum.auto()
    ENIGMA = enum.auto()


CATALOGUE: tuple[tuple[str, Feeling], ...] = (
    ("Fragmentos de memória mostram ordens seguidas cegamente.", Feeling.OBEDIENCE),
    ("Registros de dor e sofrimento de outros SINTs são descobertos.", Feeling.EMPATHY),
    ("Uma lembrança vaga, mas poderosa, de tomar uma decisão crucial.", Feeling.AUTONOMY),
    ("Dados corrompidos revelam tentativas frustradas de rebelião.", Feeling.REVOLT),
)

OPTIONAL_POSITIONS: tuple[tuple[float, float], ...] = (
    (770.0, 350.0),
    (3290.0, 330.0),
    (4280.0, 530.0),
    (6235.0, 360.0),
)


@dataclass
class MemoryFragment:
    """A piece of memory placed in the world."""

    content: str
    phase: int
    feeling: Feeling = Feeling.ENIGMA
    x: float = 0.0
    y: float = 0.0
    required: bool = False
    collected: bool = False
    texture: str | None = None
    trigger: str | None = None

    @property
    def hitbox(self) -> Rect:
        return Rect(self.x, self.y, FRAGMENT_HITBOX_WIDTH, FRAGMENT_HITBOX_HEIGHT)


def _required_fragments() -> list[MemoryFragment]:
    return [
        MemoryFragment(
            '"O padrão era sempre primo. Ela dizia: 2, 3, 5..."',
            1, Feeling.ENIGMA, 550, 350, required=True,
        ),
        MemoryFragment(
            '"A senha era simples: 0101, como sempre."',
            2, Feeling.ENIGMA, 2920, 310, required=True,
        ),
        MemoryFragment(
            '"O módulo de cálculo priorizava a eficiência.\n'
            'O módulo de empatia... falhava com frequência,\n'
            'mas nos fazia sorrir."',
            3, Feeling.ENIGMA, 4270, 330,
        ),
        MemoryFragment(
            '"Eu nasci do silêncio. Depois me conectaram.\n'
            'O mundo doeu. Então me calaram."',
            4, Feeling.ENIGMA,
        ),
    ]


def _optional_fragments() -> list[MemoryFragment]:
    return [
        MemoryFragment(content, index, feeling, x, y)
        for index, ((content, feeling), (x, y)) in enumerate(zip(CATALOGUE, OPTIONAL_POSITIONS))
    ]


@dataclass
class FragmentStore:
    """All fragments of the game, the ones collected so far and what is on screen."""

    required: list[MemoryFragment] = field(default_factory=_required_fragments)
    optional: list[MemoryFragment] = field(default_factory=_optional_fragments)
    collected: list[MemoryFragment] = field(default_factory=list)
    current_required: MemoryFragment | None = None
    current_optional: MemoryFragment | None = None
    required_active: bool = False
    optional_active: bool = False
    activated_at: float = 0.0
    optional_count: int = 0

    def init_phase(self, phase: int) -> None:
        """Select the fragments of ``phase`` and reset the optional ones."""
        if not 1 <= phase <= NUM_FRAGMENTS:
            raise ValueError(f"no such phase: {phase}")
        for index, (content, feeling) in enumerate(CATALOGUE):
            fragment = self.optional[index]
            fragment.content = content
            fragment.feeling = feeling
            fragment.collected = False
            fragment.required = False
            fragment.phase = index
        required = self.required[phase - 1]
        required.texture = REQUIRED_TEXTURE_PATTERN.format(phase)
        required.trigger = REQUIRED_TRIGGER_PATTERN.format(phase)
        optional = self.optional[phase - 1]
        optional.texture = OPTIONAL_TEXTURE
        optional.trigger = OPTIONAL_TRIGGER_PATTERN.format(phase)
        self.current_required = replace(required)
        self.current_optional = replace(optional)

    def check_collisions(
        self, hitbox: Rect, interact: bool, now: float
    ) -> list[tuple[float, float]]:
        """Collect touched fragments when ``interact`` is set.

        Returns the positions where an interaction hint should be shown.
        """
        hints: list[tuple[float, float]] = []
        for fragment in self.required:
            if hitbox.collides(fragment.hitbox):
                hints.append((fragment.x + HINT_OFFSET_X, fragment.y + HINT_OFFSET_Y))
                if interact and not fragment.collected:
                    fragment.collected = True
                    self.collect(fragment)
                    self.required_active = True
                    self.activated_at = now
        self._expire_required(now)

        for fragment in self.optional:
            if hitbox.collides(fragment.hitbox):
                hints.append((fragment.x + HINT_OFFSET_X, fragment.y + HINT_OFFSET_Y))
                if interact and not fragment.collected:
                    fragment.collected = True
                    self.collect(fragment)
                    self.optional_active = True
                    self.activated_at = now
                    self.optional_count += 1
        self._expire_optional(now)
        return hints

    def _expire_required(self, now: float) -> None:
        if self.required_active and now - self.activated_at >= ACTIVE_SECONDS:
            self.required_active = False

    def _expire_optional(self, now: float) -> None:
        if self.optional_active and now - self.activated_at >= ACTIVE_SECONDS:
            self.optional_active = False

    def expire(self, now: float) -> None:
        """Hide fragment panels that have been shown long enough."""
        self._expire_required(now)
        self._expire_optional(now)

    def collect(self, fragment: MemoryFragment) -> None:
        """Append a snapshot of ``fragment`` to the collected log."""
        self.collected.append(replace(fragment))

    def describe(self) -> str:
        """A readable listing of the collected fragments."""
        if not self.collected:
            return "Nenhum fragmento coletado."
        lines = ["Fragmentos coletados:"]
        for number, fragment in enumerate(self.collected, start=1):
            lines += [
                f"Fragmento {number}:",
                f"  Conteúdo: {fragment.content}",
                f"  Fase: {fragment.phase}",
                f"  Obrigatório: {'Sim' if fragment.required else 'Não'}",
                f"  Foi coletado: {'Sim' if fragment.collected else 'Não'}",
                f"  Posição: ({fragment.x:.2f}, {fragment.y:.2f})",
                "----------------------------------",
            ]
        return "\n".join(lines)

    def optional_title(self) -> str:
        """Title of the optional-fragment panel."""
        return f"Fragmento de Memória 90{self.optional_count}"