import pytest


class RecordingSurface:
    """Surface that remembers every plot call in order."""

    def __init__(self):
        self.calls = []

    def plot(self, x, y, pen):
        self.calls.append((x, y, pen))

    @property
    def cells(self):
        return {(x, y) for x, y, _pen in self.calls}


class FailingSurface:
    """Surface that breaks after a number of successful plots."""

    def __init__(self, fail_after=0):
        self.fail_after = fail_after
        self.count = 0

    def plot(self, x, y, pen):
        if self.count >= self.fail_after:
            from sierpinski_cli_renderer.errors import SurfaceError
            raise SurfaceError("surface gone", y, x)
        self.count += 1


class FakeScreen:
    """Enough of a curses window for the renderer."""

    def __init__(self, rows=24, cols=80, fail_at=None):
        self.rows, self.cols = rows, cols
        self.fail_at = fail_at
        self.writes = {}
        self.refreshed = 0
        self.fail_refresh = False
        self.background = None

    def getmaxyx(self):
        return self.rows, self.cols

    def erase(self):
        self.writes.clear()

    def bkgd(self, ch, attr):
        self.background = attr

    def addstr(self, y, x, text, attr=0):
        import curses
        if self.fail_at == (y, x):
            raise curses.error("addstr() returned ERR")
        for i, ch in enumerate(text):
            self.writes[(y, x + i)] = ch
        if y == self.rows - 1 and x + len(text) >= self.cols:
            # real curses errors after writing the last cell
            raise curses.error("addstr() returned ERR")

    def refresh(self):
        import curses
        if self.fail_refresh:
            raise curses.error("refresh() returned ERR")
        self.refreshed += 1

    def text_at(self, y):
        chars = [self.writes.get((y, x), ' ') for x in range(self.cols)]
        return ''.join(chars).rstrip()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def no_curses_colors(monkeypatch):
    """curses.color_pair needs initscr(); stand it in for tests."""
    import curses
    monkeypatch.setattr(curses, "color_pair", lambda n: n << 8)
