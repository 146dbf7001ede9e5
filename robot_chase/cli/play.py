"""Console session driver.

Reads one command per line, applies it through :func:`robot_chase.step.step`
and prints the board after every turn. Commands:

* ``w`` / ``a`` / ``s`` / ``d``: step up / left / down / right
* ``.``: wait while the agents advance
* ``t``: teleport
* ``q``: quit

Unrecognised input is ignored. The session ends on ``q``, end of input, or
when the player is destroyed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, Optional, Sequence, TextIO

from robot_chase.actions import Action
from robot_chase.config import FieldConfig, create_field_from_config
from robot_chase.constants import FIELD_HEIGHT, FIELD_WIDTH, INITIAL_AGENTS
from robot_chase.renderer.text import render_text
from robot_chase.step import LOSE_MESSAGE, step
from robot_chase.utils.terminal import destroyed_agent_count, is_player_destroyed

logger = logging.getLogger(__name__)

QUIT_COMMAND = "q"

COMMANDS: Dict[str, Action] = {
    "w": Action.UP,
    "a": Action.LEFT,
    "s": Action.DOWN,
    "d": Action.RIGHT,
    ".": Action.WAIT,
    "t": Action.TELEPORT,
}


def parse_command(line: str) -> Optional[Action]:
    """Map an input line to an action, or ``None`` if it is not one."""
    return COMMANDS.get(line.strip())


def run_session(config: FieldConfig, input_stream: TextIO, output_stream: TextIO) -> int:
    """Play one session; return the number of agents destroyed."""
    field = create_field_from_config(config)
    logger.info(
        "session started: %dx%d, %d agents, seed=%s",
        config.width,
        config.height,
        config.agent_count,
        config.seed,
    )

    while True:
        output_stream.write(render_text(field) + "\n\n")
        if is_player_destroyed(field):
            output_stream.write(LOSE_MESSAGE + "\n")
            break

        line = input_stream.readline()
        if not line:
            break
        if line.strip() == QUIT_COMMAND:
            break
        action = parse_command(line)
        if action is None:
            logger.debug("ignoring input %r", line.strip())
            continue
        field = step(field, action)

    score = destroyed_agent_count(field)
    logger.info("session ended on turn %d with %d agents destroyed", field.turn, score)
    return score


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="robot-chase", description="Console Robot Chase session.")
    parser.add_argument("--width", type=int, default=FIELD_WIDTH, help="Field width in cells.")
    parser.add_argument("--height", type=int, default=FIELD_HEIGHT, help="Field height in cells.")
    parser.add_argument("--agents", type=int, default=INITIAL_AGENTS, help="Number of pursuing agents.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for agent placement and teleports.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...).")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    config = FieldConfig(width=args.width, height=args.height, agent_count=args.agents, seed=args.seed)
    try:
        config.validate()
    except ValueError as exc:
        print(f"robot-chase: {exc}", file=sys.stderr)
        return 2
    run_session(config, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
