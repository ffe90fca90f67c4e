#
# PROJECT: sierpinski-cli-renderer
# MODULE: sierpinski_cli_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class SurfaceError(RuntimeError):
    """A drawing surface failed to accept a write or to refresh."""

    def __init__(self, message, row=None, col=None):
        super().__init__(message)
        self.row = row
        self.col = col
