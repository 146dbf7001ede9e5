"""Gymnasium environment wrapper for Robot Chase.

Provides a structured observation that pairs a rendered RGBA image with an
info dictionary (player, status, config). Reward is the number of agents
destroyed during the step. ``terminated`` is ``True`` once every agent is
destroyed while the player survives, ``truncated`` once the player is
destroyed.

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"player": {...}, "status": {...}, "config": {...}}}``

Usage:

``env = RobotChaseEnv(config=FieldConfig(width=20, height=10, agent_count=5))``
"""

import logging
from dataclasses import replace
from typing import Any, Callable, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from PIL.Image import Image as PILImage

from robot_chase.actions import Action, GymAction
from robot_chase.config import FieldConfig, create_field_from_config
from robot_chase.renderer.image import DEFAULT_RESOLUTION, ImageRenderer
from robot_chase.rng import SEED_BITS
from robot_chase.state import Field
from robot_chase.step import step
from robot_chase.utils.terminal import (
    destroyed_agent_count,
    is_player_destroyed,
    live_agent_count,
)

logger = logging.getLogger(__name__)

ObsType = Dict[str, Any]


def player_observation_dict(field: Field) -> Dict[str, Any]:
    """Player sub-observation (position and liveness)."""
    player = field.player
    return {
        "x": int(player.position.x),
        "y": int(player.position.y),
        "destroyed": int(player.is_destroyed),
    }


def env_status_observation_dict(field: Field) -> Dict[str, Any]:
    """Status portion of observation (score, phase, turn, live agents)."""
    phase = "ongoing"
    if is_player_destroyed(field):
        phase = "lose"
    elif live_agent_count(field) == 0:
        phase = "win"
    return {
        "score": int(destroyed_agent_count(field)),
        "phase": phase,
        "turn": int(field.turn),
        "agents": int(live_agent_count(field)),
    }


def env_config_observation_dict(field: Field) -> Dict[str, Any]:
    """Config portion of observation (seed and dimensions)."""
    return {
        "seed": field.seed if field.seed is not None else -1,
        "width": field.width,
        "height": field.height,
    }


class RobotChaseEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for Robot Chase.

    The action space is ``Discrete(len(Action))``; see
    :mod:`robot_chase.actions`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        render_resolution: int = DEFAULT_RESOLUTION,
        config: Optional[FieldConfig] = None,
        initial_field_fn: Callable[[FieldConfig], Field] = create_field_from_config,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open window.
            render_resolution: Width (pixels) of rendered image; height is scaled.
            config: Field dimensions, agent count and seed.
            initial_field_fn: Callable building the opening ``Field`` from ``config``.
        """
        from gymnasium import spaces

        self.config: FieldConfig = config or FieldConfig()
        self.config.validate()
        self._initial_field_fn = initial_field_fn
        self._render_mode = render_mode
        self._renderer = ImageRenderer(resolution=render_resolution)

        self.field: Optional[Field] = None

        cell_size = max(1, render_resolution // self.config.width)
        render_width = self.config.width * cell_size
        render_height = self.config.height * cell_size

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(render_height, render_width, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "player": spaces.Dict(
                            {
                                "x": int_box(0, 10_000),
                                "y": int_box(0, 10_000),
                                "destroyed": int_box(0, 1),
                            }
                        ),
                        "status": spaces.Dict(
                            {
                                "score": int_box(0, 1_000_000),
                                "phase": spaces.Text(max_length=32),
                                "turn": int_box(0, 1_000_000_000),
                                "agents": int_box(0, 1_000_000),
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "seed": int_box(-1, 2**62),
                                "width": int_box(1, 10_000),
                                "height": int_box(1, 10_000),
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(Action))

        self.reset(seed=self.config.seed)

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: Reseeds the episode generator; later unseeded resets continue
                from it. Each episode field gets a seed drawn from ``np_random``.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        field_seed = int(self.np_random.integers(2**SEED_BITS))
        self.field = self._initial_field_fn(replace(self.config, seed=field_seed))
        logger.info(
            "episode started: %dx%d with %d agents",
            self.field.width,
            self.field.height,
            live_agent_count(self.field),
        )
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into the ``Action`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)

        Raises:
            ValueError: If ``action`` is outside the action space.
        """
        assert self.field is not None

        if not 0 <= int(action) < len(Action):
            raise ValueError(f"Invalid action: {action}")
        step_action = Action[GymAction(int(action)).name]

        prev_score = destroyed_agent_count(self.field)
        self.field = step(self.field, step_action)
        reward = float(destroyed_agent_count(self.field) - prev_score)
        truncated = is_player_destroyed(self.field)
        terminated = not truncated and live_agent_count(self.field) == 0
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current field.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.field is not None
        img = self._renderer.render(self.field)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.field is not None
        return {
            "player": player_observation_dict(self.field),
            "status": env_status_observation_dict(self.field),
            "config": env_config_observation_dict(self.field),
        }

    def _get_obs(self) -> ObsType:
        assert self.field is not None
        img = self._renderer.render(self.field)
        return {"image": np.array(img), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        return {}

    def close(self) -> None:
        pass
