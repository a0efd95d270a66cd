"""
Game loop driving the state machine between menus, play and game over
"""
import time

from controls import ControlScheme, describe_scheme, parse_key
from state_machine import GameState, create_game_state_machine

SETTINGS_KEYS = {
    '1': ControlScheme.CLASSIC,
    '2': ControlScheme.ALT,
}


class Game:
    def __init__(self, simulation, input_port, renderer, screens, sleep=time.sleep):
        self.simulation = simulation
        self.input = input_port
        self.renderer = renderer
        self.screens = screens
        self.sleep = sleep
        self.scheme = simulation.config.control_scheme
        self.machine = create_game_state_machine()

        self.handlers = {
            GameState.START_MENU: self._start_menu,
            GameState.SETTINGS: self._settings,
            GameState.PLAYING: self._play_turn,
            GameState.LEVEL_TRANSITION: self._level_transition,
            GameState.GAME_OVER: self._game_over,
        }

    @property
    def state(self):
        return self.machine.state

    def run(self) -> int:
        while not self.machine.finished:
            self.handlers[self.machine.state]()
        return 0

    def _read_key(self):
        key = self.input.read_key()
        if key == '':
            self.machine.fire("end_of_input")
        return key

    def _start_menu(self):
        self.renderer.show_screen(self.screens["start"])
        while True:
            key = self._read_key()
            if key == '':
                return
            if key == 'p':
                self.simulation.reset()
                self.machine.fire("start_game")
                self.renderer.render(self.simulation)
                return
            if key == 's':
                self.machine.fire("open_settings")
                return

    def _settings(self):
        text = self.screens["settings"] + f"\nCurrent: {self.scheme.value} ({describe_scheme(self.scheme)})\n"
        self.renderer.show_screen(text)
        while True:
            key = self._read_key()
            if key == '':
                return
            if key in SETTINGS_KEYS:
                self.scheme = SETTINGS_KEYS[key]
                self.simulation.config.control_scheme = self.scheme
                self.machine.fire("close_settings")
                return
            if key == 'b':
                self.machine.fire("close_settings")
                return

    def _play_turn(self):
        key = self._read_key()
        if key == '':
            return

        result = self.simulation.step(parse_key(key, self.scheme))
        self.renderer.render(self.simulation)

        if result.level_cleared:
            self.machine.fire("clear_level")
        elif result.hit:
            self.machine.fire("player_hit")

    def _level_transition(self):
        sim = self.simulation
        self.renderer.show_level_cleared(sim.level, sim.score)
        self.sleep(sim.config.level_pause)
        sim.advance_level()
        self.machine.fire("next_level")
        self.renderer.render(sim)

    def _game_over(self):
        sim = self.simulation
        # Leave the fatal board up for a moment
        self.sleep(sim.config.game_over_pause)
        self.renderer.show_game_over(sim.level, sim.score)
        while True:
            key = self._read_key()
            if key == '':
                return
            if key == 'y':
                sim.reset()
                self.machine.fire("retry")
                self.renderer.render(sim)
                return
            if key == 'n':
                self.machine.fire("give_up")
                return
