"""
Input Handler - Translates key presses to engine commands.
This is a THIN ADAPTER - no game logic here.
"""
import pygame

from typing_tug.gameplay.effects import EffectKind
from typing_tug.gameplay.engine import TugOfWarEngine, MatchPhase
from typing_tug.ui.renderer import Renderer


# Key mappings for power-ups
EFFECT_KEYS = {
    pygame.K_F1: EffectKind.POWER_GRIP,
    pygame.K_F2: EffectKind.ANCHOR,
    pygame.K_F3: EffectKind.BLIND,
}

SUBMIT_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)

MAX_INPUT_LENGTH = 32


class InputHandler:
    """
    Handles keyboard input and translates to engine commands.

    The input handler:
    - Edits the typing buffer shown by the renderer
    - Submits the buffer on Enter (Enter also starts the first match)
    - Calls engine methods for start and power-ups
    """

    def __init__(self, engine: TugOfWarEngine, renderer: Renderer):
        self.engine = engine
        self.renderer = renderer

    def handle_key(self, key: int, char: str = "") -> bool:
        """
        Handle a single key press. char is the typed character, if any.
        Returns True if the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        if key == pygame.K_F5:
            self._start()

        elif key in SUBMIT_KEYS:
            # Enter never dismisses a result; only F5 restarts a finished match
            if self.engine.running:
                self._submit()
            elif self.engine.phase == MatchPhase.NOT_STARTED:
                self._start()

        elif key in EFFECT_KEYS:
            self.engine.activate_effect(EFFECT_KEYS[key])

        elif key == pygame.K_BACKSPACE:
            self.renderer.input_text = self.renderer.input_text[:-1]

        elif char and char.isprintable() and self.engine.running:
            if len(self.renderer.input_text) < MAX_INPUT_LENGTH:
                self.renderer.input_text += char

        return False

    def _start(self):
        self.engine.start()
        self.renderer.input_text = ""

    def _submit(self):
        """Submit the buffer; the field clears whatever the verdict."""
        self.engine.submit_answer(self.renderer.input_text)
        self.renderer.input_text = ""
