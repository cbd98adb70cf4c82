import argparse
import json
import logging
import random
from typing import Dict, Optional

from config import SimulationSettings, load_settings
from players import AVAILABLE_VARIANTS, Player, create_player
from replay import save_replay
from scheduler import FrameLoop
from simulation import SnakeSimulation

logger = logging.getLogger(__name__)


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    settings: SimulationSettings,
    game_params: argparse.Namespace,
    player: Optional[Player] = None
) -> Dict:
    """
    Runs a headless simulation for a fixed number of frames.

    Args:
        settings: Grid, clamp, timing and seed settings.
        game_params: An object (like argparse.Namespace) with frames, fps and
                     optionally player, replay and show_board.
        player: Input source; built from game_params.player when omitted.

    Returns:
        A dictionary summarizing the run.
    """
    if game_params.frames < 0:
        raise ValueError(f"frames must not be negative, got {game_params.frames}")
    if game_params.fps <= 0:
        raise ValueError(f"fps must be positive, got {game_params.fps}")

    rng = random.Random(settings.seed)
    simulation = SnakeSimulation(
        grid_size=settings.grid_size,
        clamp_max=settings.clamp_max,
        rng=rng
    )
    if player is None:
        player = create_player(getattr(game_params, "player", None), rng=rng)

    loop = FrameLoop(simulation, settings.move_interval, settings.food_interval)
    dt = 1.0 / game_params.fps

    logger.info(
        f"Running {game_params.frames} frames at {game_params.fps} fps "
        f"(grid {settings.grid_size}, seed {settings.seed})"
    )

    simulation.record_history()
    for _ in range(game_params.frames):
        pressed = player.get_pressed(simulation.get_current_state())
        loop.advance(dt, pressed)

    if getattr(game_params, "show_board", False):
        simulation.print_board()

    result = {
        "ticks": simulation.tick_number,
        "length": len(simulation.snake),
        "food_eaten": simulation.food_eaten,
        "food_on_board": len(simulation.food),
        "direction": simulation.direction,
    }

    replay_path = getattr(game_params, "replay", None)
    if replay_path:
        metadata = dict(result)
        metadata.update({
            "grid_size": settings.grid_size,
            "clamp_max": settings.clamp_max,
            "seed": settings.seed,
            "frames": game_params.frames,
            "fps": game_params.fps,
        })
        save_replay(simulation.history, replay_path, metadata)

    return result


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run a headless grid snake simulation."
    )
    parser.add_argument("--frames", type=int, required=False, default=600,
                        help="Number of frames to simulate")
    parser.add_argument("--fps", type=float, required=False, default=60.0,
                        help="Frames per simulated second")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="RNG seed (overrides SNAKE_SEED)")
    parser.add_argument("--player", type=str, required=False, default="random",
                        choices=AVAILABLE_VARIANTS,
                        help="Input source driving the snake")
    parser.add_argument("--replay", type=str, required=False, default=None,
                        help="Write a JSON replay to this path")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the final board")

    args = parser.parse_args(argv)

    settings = load_settings()
    if args.seed is not None:
        settings.seed = args.seed

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    result = run_simulation(settings, args)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
