#
# PROJECT: sierpinski-cli-renderer
# MODULE: sierpinski_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
from dataclasses import dataclass
from typing import Tuple


@dataclass
class RenderConfig:
    """Configuration for the Sierpinski renderer."""
    use_color: bool = True
    use_braille: bool = True
    glyph: str = '*'
    depths: Tuple[int, ...] = (4, 7)
    max_depth: int = 9
    title: str = "Sierpinski triangle"
    hint: str = "Hit <ENTER> to exit"

    def __post_init__(self):
        self.depths = tuple(int(d) for d in self.depths)
        self.validate()

    def validate(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")
        if not isinstance(self.glyph, str) or len(self.glyph) != 1:
            raise ValueError(f"glyph must be a single character, got {self.glyph!r}")
        too_deep = [d for d in self.depths if d > self.max_depth]
        if too_deep:
            raise ValueError(f"depth {too_deep[0]} exceeds max_depth {self.max_depth}")

    @property
    def aspect(self) -> int:
        """Base width per unit of triangle height, in canvas pixels."""
        # Braille dots are square; glyph cells are twice as tall as wide
        return 1 if self.use_braille else 2

    def shift_depths(self, delta: int):
        """Change every depth by delta, clamped to [0, max_depth]."""
        self.depths = tuple(max(0, min(self.max_depth, d + delta)) for d in self.depths)

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        # Note: accurate color detection requires curses initialization,
        # so this is a pre-init guess.

        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
            glyph='◆' if supports_utf8 and not is_linux_console else '*',
        )
