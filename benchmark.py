import argparse
import random
import time

from arena import play_match, plot_match_stats
from config import DIFFICULTY_ITERATIONS, LOG_LEVELS, OUTPUT_DIR, configure_logging
from mcts_ai import MCTSAI
from minimax_ai import MinimaxAI
from random_ai import RandomAI
from utils import get_plot_path


def build_agents(rng, iterations):
    return {
        "Random": RandomAI(rng=rng),
        "Easy": MCTSAI(iterations=iterations['EASY'], rng=rng),
        "Medium": MCTSAI(iterations=iterations['MEDIUM'], rng=rng),
        "Hard": MinimaxAI(),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark every difficulty against random and minimax play.")
    parser.add_argument("--games", type=int, default=50, help="Games per match")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--easy-iterations", type=int, default=DIFFICULTY_ITERATIONS['EASY'])
    parser.add_argument("--medium-iterations", type=int, default=DIFFICULTY_ITERATIONS['MEDIUM'])
    parser.add_argument("--output-dir", default=OUTPUT_DIR)
    parser.add_argument("--no-plot", action="store_true", help="Skip writing the bar chart")
    parser.add_argument("--log-level", default="INFO", type=str.upper, choices=LOG_LEVELS)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    start_time = time.time()
    rng = random.Random(args.seed)

    iterations = {'EASY': args.easy_iterations, 'MEDIUM': args.medium_iterations}
    agents = build_agents(rng, iterations)
    opponents = {"Random": RandomAI(rng=rng), "Minimax": MinimaxAI()}

    all_stats = []
    for opponent_name, opponent_agent in opponents.items():
        for agent_name, agent in agents.items():
            print(f"Playing {agent_name} vs {opponent_name} ({args.games} games)...")
            stats = play_match(agent, opponent_agent, args.games,
                               name=f"{agent_name} vs {opponent_name}")
            print(stats.summary())
            all_stats.append(stats)

    if not args.no_plot:
        plot_path = get_plot_path("benchmark", output_dir=args.output_dir)
        plot_match_stats(all_stats, plot_path)
        print(f"Benchmark plot saved to {plot_path}")

    elapsed_time = time.time() - start_time
    print(f"Benchmark complete in {elapsed_time:.2f} seconds!")
    return all_stats


if __name__ == "__main__":
    main()
