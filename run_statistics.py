#!/usr/bin/env python3
"""
Statistics Collection Script for the robots game
Plays many headless games with a fixed policy and reports how far they get
"""

import sys
import random
from dataclasses import replace
import numpy as np
from config import GameConfig
from controls import Action, Command, DIRECTIONS, move
from simulation import Simulation

TELEPORT = Command(Action.TELEPORT)
WAIT = Command(Action.WAIT)


def random_policy(simulation, chooser):
    """Random move, teleporting once in a while"""
    if chooser.random() < 0.05:
        return TELEPORT
    return move(chooser.choice(list(DIRECTIONS)))


def wait_policy(simulation, chooser):
    return WAIT


def stay_policy(simulation, chooser):
    return move('stay')


POLICIES = {
    'random': random_policy,
    'wait': wait_policy,
    'stay': stay_policy,
}


def run_single_game(policy='random', config=None, max_turns=1000, seed=None):
    """Play until the first hit (or max_turns) and return statistics"""
    if config is None:
        config = GameConfig(level_pause=0, game_over_pause=0, seed=seed)
    elif seed is not None:
        config = replace(config, seed=seed)
    choose = POLICIES[policy]
    chooser = random.Random(seed)

    sim = Simulation(config)

    levels_cleared = 0
    hit = False
    while sim.turns < max_turns:
        result = sim.play_turn(choose(sim, chooser))
        if result.level_cleared:
            levels_cleared += 1
        if result.hit:
            hit = True
            break

    return {
        'policy': policy,
        'level': sim.level,
        'score': sim.score,
        'levels_cleared': levels_cleared,
        'turns': sim.turns,
        'died': hit,
    }


def run_statistics(num_runs=20, policy='random', max_turns=1000, seed=None):
    """Run multiple games and collect statistics"""
    print(f"Running {num_runs} '{policy}' games for statistical analysis...")
    print("=" * 80)

    all_stats = []

    for i in range(num_runs):
        print(f"Running game {i+1}/{num_runs}...", end='\r')
        game_seed = None if seed is None else seed + i
        stats = run_single_game(policy, max_turns=max_turns, seed=game_seed)
        all_stats.append(stats)

    print("\n" + "=" * 80)

    levels = np.array([s['level'] for s in all_stats])
    scores = np.array([s['score'] for s in all_stats])
    turns = np.array([s['turns'] for s in all_stats])
    deaths = sum(1 for s in all_stats if s['died'])

    print("GAME STATISTICS REPORT")
    print("=" * 80)
    print(f"Number of games: {num_runs}")
    print(f"Policy: {policy}, max {max_turns} turns per game")
    print()

    print("--- LEVEL REACHED ---")
    print(f"Average Level: {np.mean(levels):.2f} ± {np.std(levels):.2f}")
    print(f"  Min: {np.min(levels)} | Max: {np.max(levels)} | Median: {np.median(levels):.1f}")
    print()

    print("--- SCORING STATISTICS ---")
    print(f"Average Score: {np.mean(scores):.2f} ± {np.std(scores):.2f}")
    print(f"  Min: {np.min(scores)} | Max: {np.max(scores)} | Median: {np.median(scores):.1f}")
    print()

    print("--- GAME LENGTH ---")
    print(f"Average Turns: {np.mean(turns):.1f} ± {np.std(turns):.1f}")
    print(f"  Min: {np.min(turns)} | Max: {np.max(turns)} | Median: {np.median(turns):.1f}")
    survived = num_runs - deaths
    if survived > 0:
        print(f"  Note: {survived} game(s) reached the {max_turns}-turn limit")
    print("=" * 80)

    return all_stats


def main():
    """Main entry point"""
    num_runs = 20
    policy = 'random'
    if len(sys.argv) > 1:
        try:
            num_runs = int(sys.argv[1])
        except ValueError:
            print(f"Invalid argument. Using default: {num_runs} runs")
    if len(sys.argv) > 2:
        if sys.argv[2] in POLICIES:
            policy = sys.argv[2]
        else:
            print(f"Unknown policy. Using default: {policy}")

    run_statistics(num_runs, policy)


if __name__ == "__main__":
    main()
