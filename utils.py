import re


class Color:
    GREEN = '\033[92m'
    BLUE = '\033[94m'
    YELLOW = '\033[93m'
    DARK_YELLOW = '\033[0;33m'
    RED = '\033[91m'
    RESET = '\033[0m'


def strip_ansi(text):
    """Remove ANSI escape codes from text"""
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|[\[0-?]*[ -/]*[@-~])')
    return ansi_escape.sub('', text)


def center(text, width):
    """Pad every line so the block sits in the middle of width columns"""
    lines = text.splitlines()
    block = max((len(strip_ansi(line)) for line in lines), default=0)
    indent = ' ' * max((width - block) // 2, 0)
    return '\n'.join(indent + line if line else line for line in lines)
