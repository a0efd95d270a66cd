"""
Direct keyboard input: one key per read, no line buffering or echo
"""
import sys
import termios
import tty


class DirectInput:
    """Context manager switching stdin to cbreak mode and restoring it on exit"""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.fd = None
        self.old_settings = None

    def __enter__(self):
        if self.stream.isatty():
            self.fd = self.stream.fileno()
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False

    def restore(self):
        if self.old_settings is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    def read_key(self):
        """Block for one character, '' at end of input"""
        return self.stream.read(1)


class ScriptedInput:
    """Keys from a string or list, then end of input"""

    def __init__(self, keys):
        self.keys = list(keys)

    def read_key(self):
        if not self.keys:
            return ''
        return self.keys.pop(0)
