"""
Terminal renderer for the board, the text screens and the banners
"""
import shutil
import sys

from grid import EMPTY, PLAYER, DEAD_PLAYER, ROBOT, JUNK
from utils import Color, center

CLEAR_SCREEN = "\033[2J\033[H"

GLYPHS = {
    EMPTY: '   ',
    PLAYER: ' # ',
    DEAD_PLAYER: f' {Color.DARK_YELLOW}@{Color.RESET} ',
    ROBOT: ' + ',
    JUNK: ' * ',
}


class TerminalRenderer:
    def __init__(self, stream=None, verbose=False, columns=None, clear=True):
        self.stream = stream or sys.stdout
        self.verbose = verbose
        self.columns = columns
        self.clear = clear

    def _width(self):
        if self.columns is not None:
            return self.columns
        return shutil.get_terminal_size().columns

    def _write(self, text=""):
        print(text, file=self.stream)

    def _clear(self):
        if self.clear:
            self.stream.write(CLEAR_SCREEN)

    def draw_board(self, simulation):
        cells = simulation.grid.snapshot(simulation.player, simulation.robots)
        border = '_' + '___' * simulation.grid.width + '_'
        lines = [border]
        for row in cells:
            lines.append('|' + ''.join(GLYPHS[int(code)] for code in row) + '|')
        lines.append(border)
        return '\n'.join(lines)

    def render(self, simulation):
        self._clear()
        self._write(self.draw_board(simulation))
        self._write(f"Level: {simulation.level}  Score: {simulation.score}  "
                    f"Robots: {simulation.entities.alive_count}/{simulation.entities.robot_count}")

        if self.verbose:
            x, y = simulation.player
            self._write(f"Char: {x}, {y}")
            for robot in simulation.robots:
                rx, ry = robot.position
                self._write(f"Robot {robot.id}: {rx}, {ry} ({robot.status.value})")
            for event in simulation.events:
                self._write(event)
        self.stream.flush()

    def show_screen(self, text):
        self._clear()
        self._write(center(text.rstrip('\n'), self._width()))
        self.stream.flush()

    def show_level_cleared(self, level, score):
        self._write(center(f"Level {level} cleared! Score: {score}", self._width()))
        self.stream.flush()

    def show_game_over(self, level, score):
        self._clear()
        width = self._width()
        self._write(center(f"{Color.RED}Game Over!{Color.RESET}", width))
        self._write(center(f"Level: {level}  Score: {score}", width))
        self._write(center("Retry?[y/n]", width))
        self.stream.flush()
