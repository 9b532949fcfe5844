"""Command input sources: console, script files, and a stack combining them."""


class ConsoleSource:
    """Reads commands from the terminal with a prompt."""

    def read_line(self, prompt):
        try:
            return input(prompt)
        except EOFError:
            return None


class ReaderSource:
    """Reads commands from an open text stream, echoing them if asked."""

    def __init__(self, stream, echo=False):
        self.stream = stream
        self.echo = echo

    def read_line(self, prompt):
        line = self.stream.readline()
        if not line:
            self.close()
            return None
        line = line.rstrip("\n")
        if self.echo:
            print(f"{prompt}{line}")
        return line

    def close(self):
        self.stream.close()


class CommandSources:
    """
    A stack of sources. Lines come from the most recently added source until
    it runs dry, then from the one below it (so `load` scripts run before
    control returns to the player).
    """

    def __init__(self):
        self._sources = []

    def add_source(self, source):
        self._sources.append(source)

    def __len__(self):
        return len(self._sources)

    def get_line(self, prompt=""):
        """Next line of input, or None once every source is exhausted."""
        while self._sources:
            line = self._sources[-1].read_line(prompt)
            if line is not None:
                return line
            self._sources.pop()
        return None

    def close(self):
        """Drop every source, closing any file streams not yet read to the end."""
        while self._sources:
            source = self._sources.pop()
            if isinstance(source, ReaderSource):
                source.close()
