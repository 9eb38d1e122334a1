"""
Renderer - Reads engine state and draws it with pygame.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Iterable, Optional, Tuple

import pygame

from typing_tug.gameplay.constants import ROPE_MAX
from typing_tug.gameplay.effects import EffectKind
from typing_tug.gameplay.engine import (
    TugOfWarEngine, MatchPhase, MatchSnapshot, Outcome,
    GameEvent, AnswerEvent, AnswerResult, EffectActivatedEvent
)


# Layout
LINE_MARGIN = 60           # distance of the win/loss lines from the window edge
MARKER_MARGIN = 80         # marker travel stops this far from the edge
MARKER_RADIUS = 16
WORD_OFFSET_Y = 140        # word baseline below the rope
BLIND_PAD = 8

# Flash durations (ms)
ANSWER_FLASH_MS = 120
EFFECT_FLASH_MS = 200
FLASH_ALPHA = 38

# Colors
COLOR_BG = (245, 248, 252)
COLOR_LOSS_ZONE = (235, 242, 247)
COLOR_WIN_ZONE = (225, 240, 235)
COLOR_CENTER_LINE = (210, 220, 230)
COLOR_ROPE = (120, 90, 60)
COLOR_LOSS_LINE = (200, 80, 80)
COLOR_WIN_LINE = (80, 160, 80)
COLOR_MARKER = (60, 120, 255)
COLOR_HINT = (120, 130, 140)
COLOR_WORD = (30, 30, 30)
COLOR_BLIND = (0, 0, 0, 180)
COLOR_HUD = (40, 40, 40)
COLOR_INPUT_BG = (255, 255, 255)
COLOR_INPUT_BORDER = (150, 160, 170)

COLOR_FLASH_CORRECT = (50, 200, 120)
COLOR_FLASH_WRONG = (220, 80, 80)

EFFECT_FLASH_COLORS = {
    EffectKind.POWER_GRIP: (80, 160, 255),
    EffectKind.ANCHOR: (80, 200, 120),
    EffectKind.BLIND: (30, 30, 30),
}

OUTCOME_MESSAGES = {
    Outcome.WIN: "Victory! Reached the win line",
    Outcome.LOSS: "Defeat... Pulled over the loss line",
    Outcome.TIME_UP_WIN: "Time up: narrow victory",
    Outcome.TIME_UP_LOSS: "Time up: narrow defeat",
    Outcome.DRAW: "Draw",
}

KEY_HINTS = "Enter submit   F1 Power Grip   F2 Anchor   F3 Blind   F5 start   Esc quit"


def rope_to_screen_x(position: float, width: int) -> int:
    """Map a rope position in [-100, 100] to a pixel column."""
    travel = (width - 2 * MARKER_MARGIN) / 2.0
    return int(width / 2 + (position / ROPE_MAX) * travel)


def format_time(remaining_ms: int) -> str:
    return f"Time: {remaining_ms / 1000.0:.1f}s"


class Renderer:
    """
    Renders engine state to a pygame surface.

    This class reads from the engine but never modifies it.
    """

    def __init__(self, engine: TugOfWarEngine, font_name: Optional[str] = None):
        self.engine = engine
        self.font_name = font_name

        # Created in init_fonts() once pygame is initialized
        self.hud_font = None
        self.word_font = None
        self.small_font = None

        # Typing buffer (owned by the input handler, drawn here)
        self.input_text = ""

        # Flash overlays
        self.flash_color: Optional[Tuple[int, int, int]] = None
        self.flash_until = 0
        self.buff_flash_color: Optional[Tuple[int, int, int]] = None
        self.buff_flash_until = 0

    def init_fonts(self):
        """Create fonts. Requires pygame.font to be initialized."""
        self.hud_font = pygame.font.SysFont(self.font_name, 22, bold=True)
        self.word_font = pygame.font.SysFont(self.font_name, 44, bold=True)
        self.small_font = pygame.font.SysFont(self.font_name, 18, bold=True)

    # =========================================================================
    # EVENT REACTIONS
    # =========================================================================

    def react(self, events: Iterable[GameEvent], now_ms: int):
        """Start flashes for answer and power-up events."""
        for event in events:
            if isinstance(event, AnswerEvent):
                if event.result == AnswerResult.CORRECT:
                    self.flash_color = COLOR_FLASH_CORRECT
                else:
                    self.flash_color = COLOR_FLASH_WRONG
                self.flash_until = now_ms + ANSWER_FLASH_MS
            elif isinstance(event, EffectActivatedEvent):
                self.buff_flash_color = EFFECT_FLASH_COLORS[event.kind]
                self.buff_flash_until = now_ms + EFFECT_FLASH_MS

    # =========================================================================
    # DRAWING
    # =========================================================================

    def render(self, surface: pygame.Surface, now_ms: int):
        """Render the entire frame."""
        state = self.engine.snapshot()
        surface.fill(COLOR_BG)

        self.render_arena(surface, state)
        self.render_word(surface, state)
        self.render_hud(surface, state)
        self.render_input(surface)
        self.render_flashes(surface, now_ms)

        if state.phase != MatchPhase.RUNNING:
            self.render_banner(surface, state)

    def render_arena(self, surface: pygame.Surface, state: MatchSnapshot):
        """Zones, rope, win/loss lines and the player marker."""
        w, h = surface.get_size()
        center_y = h // 2

        pygame.draw.rect(surface, COLOR_LOSS_ZONE, (0, center_y - 60, w // 2, 120))
        pygame.draw.rect(surface, COLOR_WIN_ZONE, (w // 2, center_y - 60, w // 2, 120))
        pygame.draw.rect(surface, COLOR_CENTER_LINE, (w // 2 - 3, center_y - 120, 6, 240))

        pygame.draw.line(surface, COLOR_ROPE, (LINE_MARGIN, center_y), (w - LINE_MARGIN, center_y), 8)

        pygame.draw.line(surface, COLOR_LOSS_LINE,
                         (LINE_MARGIN, center_y - 80), (LINE_MARGIN, center_y + 80), 8)
        pygame.draw.line(surface, COLOR_WIN_LINE,
                         (w - LINE_MARGIN, center_y - 80), (w - LINE_MARGIN, center_y + 80), 8)

        marker_x = rope_to_screen_x(state.rope_position, w)
        pygame.draw.circle(surface, COLOR_MARKER, (marker_x, center_y), MARKER_RADIUS)
        label = self.small_font.render("YOU", True, COLOR_MARKER)
        surface.blit(label, label.get_rect(center=(marker_x, center_y - MARKER_RADIUS - 12)))

    def render_word(self, surface: pygame.Surface, state: MatchSnapshot):
        """Target word under the rope, masked while Blind is active."""
        if state.phase == MatchPhase.NOT_STARTED:
            return

        w, h = surface.get_size()
        text = self.word_font.render(state.current_word, True, COLOR_WORD)
        rect = text.get_rect(midbottom=(w // 2, h // 2 + WORD_OFFSET_Y))
        surface.blit(text, rect)

        if state.word_hidden:
            mask_rect = rect.inflate(BLIND_PAD * 2, BLIND_PAD * 2)
            mask = pygame.Surface(mask_rect.size, pygame.SRCALPHA)
            pygame.draw.rect(mask, COLOR_BLIND, mask.get_rect(), border_radius=8)
            surface.blit(mask, mask_rect.topleft)

            msg = self.small_font.render("Blind!", True, (255, 255, 255))
            surface.blit(msg, msg.get_rect(center=mask_rect.center))

    def render_hud(self, surface: pygame.Surface, state: MatchSnapshot):
        """Time, score, combo and active effects along the top."""
        w, _ = surface.get_size()
        parts = [
            format_time(state.remaining_time_ms),
            f"Score: {state.score}",
            f"Combo: {state.combo}",
            state.effects_text,
        ]
        line = self.hud_font.render("    ".join(parts), True, COLOR_HUD)
        surface.blit(line, line.get_rect(midtop=(w // 2, 12)))

        hints = self.small_font.render(KEY_HINTS, True, COLOR_HINT)
        surface.blit(hints, hints.get_rect(midtop=(w // 2, 44)))

    def render_input(self, surface: pygame.Surface):
        """The typing buffer along the bottom."""
        w, h = surface.get_size()
        box = pygame.Rect(20, h - 60, w - 40, 44)
        pygame.draw.rect(surface, COLOR_INPUT_BG, box)
        pygame.draw.rect(surface, COLOR_INPUT_BORDER, box, 2)

        text = self.hud_font.render(self.input_text + "_", True, COLOR_WORD)
        surface.blit(text, text.get_rect(midleft=(box.x + 10, box.centery)))

    def render_flashes(self, surface: pygame.Surface, now_ms: int):
        """Brief full-window tint after answers and power-ups."""
        if self.flash_color is not None and now_ms < self.flash_until:
            self._tint(surface, self.flash_color)
        if self.buff_flash_color is not None and now_ms < self.buff_flash_until:
            self._tint(surface, self.buff_flash_color)

    def render_banner(self, surface: pygame.Surface, state: MatchSnapshot):
        """Start prompt before the first match, result after each one."""
        w, h = surface.get_size()
        if state.outcome is None:
            message = "Press Enter or F5 to start"
        else:
            message = (f"{OUTCOME_MESSAGES[state.outcome]}  -  Score: {state.score}  "
                       f"Combo: {state.combo}  -  F5 to play again")

        text = self.hud_font.render(message, True, COLOR_HUD)
        rect = text.get_rect(center=(w // 2, h // 2 - 160))
        pygame.draw.rect(surface, COLOR_INPUT_BG, rect.inflate(24, 16))
        surface.blit(text, rect)

    def _tint(self, surface: pygame.Surface, color: Tuple[int, int, int]):
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((*color, FLASH_ALPHA))
        surface.blit(overlay, (0, 0))
