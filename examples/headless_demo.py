"""
Headless demo of Pong3D: a human-free VsAI session logged to the console

The left paddle follows the ball with a naive key-holding strategy, the right
paddle is driven by the built-in AI.
"""

import argparse
import logging

from pong3d.core import EventType, GameSession, Key, Mode, Side
from pong3d.gui import FixedStepDriver

logger = logging.getLogger("pong3d.demo")


def follow_ball(session: GameSession) -> None:
    """Holds the left paddle's up/down key towards the ball"""
    snapshot = session.snapshot()
    if snapshot is None:
        return
    ball_z = snapshot.ball_position[2]
    paddle_z = snapshot.left_paddle.position[2]
    session.apply_input(Side.LEFT, Key.UP, ball_z < paddle_z - 0.5)
    session.apply_input(Side.LEFT, Key.DOWN, ball_z > paddle_z + 0.5)


def run_demo(seconds: float, difficulty: str, seed: int | None) -> tuple[int, int]:
    session = GameSession(seed=seed)
    session.set_mode(Mode.VS_AI)
    session.set_difficulty(difficulty)
    session.set_paused(False)

    driver = FixedStepDriver(session)
    frames = int(seconds * session.config.TICK_RATE)
    for _ in range(frames):
        follow_ball(session)
        for result in driver.advance(driver.step):
            for event in result.events:
                if event.type is EventType.SCORE:
                    logger.info("Point for %s: %s", event.side.value, result.snapshot.score)

    final = session.snapshot()
    return final.score if final is not None else (0, 0)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a headless Pong3D match")
    parser.add_argument("--seconds", type=float, default=60.0, help="Simulated time")
    parser.add_argument(
        "--difficulty", choices=["easy", "medium", "hard"], default="medium", help="AI level"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for serves")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    score = run_demo(args.seconds, args.difficulty, args.seed)
    logger.info("Final score: %d - %d", *score)


if __name__ == "__main__":
    main()
