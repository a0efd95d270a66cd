from graphviz import Digraph

from state_machine import GameState, create_game_state_machine


def build_state_diagram(machine=None):
    """Digraph of the game states (circles) and transitions (boxes)"""
    machine = machine or create_game_state_machine()

    dot = Digraph("Robots_Game_States", format="png")
    dot.attr(rankdir="LR", size="8,5")

    for state in GameState:
        dot.node(state.value, state.value, shape="circle")

    for name, transition in machine.transitions.items():
        dot.node(name, name, shape="box", style="filled", color="lightgray")
        for source in transition.sources:
            dot.edge(source.value, name)
        dot.edge(name, transition.target.value)

    return dot


if __name__ == "__main__":
    dot = build_state_diagram()
    dot.render("robots_state_machine", view=True)
    print("State machine diagram saved to robots_state_machine.png")
