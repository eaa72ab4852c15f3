"""
SurvivalEnv - headless Gymnasium wrapper around the arena simulation
--------------------------------------------------------------------
- Gymnasium API, one fixed dt per step
- MultiDiscrete action space: [horizontal(3), vertical(3)] -> intent in {-1, 0, 1}
- Vector observation: player state + top-K nearest projectiles
- Reward: small bonus for every step survived, penalty per hit, penalty on death

Seeding goes through gymnasium's np_random generator, which is handed to the
simulation, so the same seed replays the same spawn pattern.

Quick test:
    python -m game.arena --seed 42
    python -m game.arena --realtime --duration 10
"""

from __future__ import annotations

import argparse
import time
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .controls import DIRECTIONS, FrameClock, InputState
from .simulation import Simulation
from .utils import clamp, distance_sq

DEFAULT_REWARD_CONFIG = {
    "R_SURVIVE": 0.01,  # per step alive
    "R_HIT": 0.5,       # per hp lost
    "R_DEATH": 5.0,
}


class SurvivalEnv(gym.Env):
    """Dodge edge-spawned projectiles for as long as possible"""

    metadata = {"render_modes": [], "render_fps": 30}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        dt: float = 1 / 30,
        max_steps: int = 3600,  # 120s at 30 FPS
        k_projectiles: int = 8,
        reward_config: Optional[Dict[str, float]] = None,
        **sim_kwargs,
    ):
        super().__init__()

        if render_mode is not None:
            raise ValueError(f"Unsupported render mode: {render_mode}")
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")

        self.render_mode = render_mode
        self.dt = dt
        self.max_steps = max_steps
        self.k_projectiles = k_projectiles
        self.reward_config = dict(DEFAULT_REWARD_CONFIG)
        if reward_config:
            self.reward_config.update(reward_config)
        self.sim_kwargs = sim_kwargs

        # Validate simulation kwargs up front
        probe = Simulation(rng=0, **sim_kwargs)
        self.width = probe.width
        self.height = probe.height
        self._max_projectile_speed = max(1e-6, probe.spawner.speed_range[1])

        # horizontal: 0 left, 1 none, 2 right / vertical: 0 up, 1 none, 2 down
        self.action_space = spaces.MultiDiscrete([3, 3])

        # Player: pos(2) vel(2) hp(1); each projectile: rel pos(2) rel vel(2)
        obs_dim = 2 + 2 + 1 + (self.k_projectiles * 4)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.sim: Simulation = None  # type: ignore
        self._step_count = 0
        self._hits_taken = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self._step_count = 0
        self._hits_taken = 0
        self.sim = Simulation(rng=self.np_random, **self.sim_kwargs)

        return self._get_obs(), self._get_info()

    def step(self, action):
        action = np.asarray(action).reshape(-1)
        if action.shape != (2,):
            raise ValueError(f"Expected action of shape (2,), got {action.shape}")

        intent = (int(action[0]) - 1, int(action[1]) - 1)
        events = self.sim.step(self.dt, intent)
        self._hits_taken += events["hits"]

        reward = self._compute_reward(events)

        terminated = self.sim.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self):
        return None

    def close(self):
        pass

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        p = self.sim.player
        speed = max(1e-6, p.speed)

        obs_parts = [p.x / self.width * 2 - 1, p.y / self.height * 2 - 1,
                     clamp(p.vx / speed, -1, 1), clamp(p.vy / speed, -1, 1),
                     p.hp / p.max_hp * 2 - 1]

        nearest = sorted(
            self.sim.projectiles,
            key=lambda b: distance_sq(b.x, b.y, p.x, p.y),
        )[: self.k_projectiles]
        for b in nearest:
            dx = (b.x - p.x) / self.width
            dy = (b.y - p.y) / self.height
            dvx = (b.vx - p.vx) / self._max_projectile_speed
            dvy = (b.vy - p.vy) / self._max_projectile_speed
            obs_parts += [
                clamp(dx, -1, 1),
                clamp(dy, -1, 1),
                clamp(dvx, -1, 1),
                clamp(dvy, -1, 1),
            ]
        obs_parts += [0.0] * (4 * (self.k_projectiles - len(nearest)))

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events: Dict[str, float]) -> float:
        rc = self.reward_config
        reward = rc["R_SURVIVE"]
        reward -= rc["R_HIT"] * events["hits"]
        if self.sim.game_over:
            reward -= rc["R_DEATH"]
        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "hp": self.sim.player.hp,
            "survived": self.sim.survived,
            "hits_taken": self._hits_taken,
            "num_projectiles": len(self.sim.projectiles),
            "alive": self.sim.player.alive,
            "game_over": self.sim.game_over,
            "step": self._step_count,
        }


# ----------------------------
# Headless sanity run
# ----------------------------

def run_random_episode(
    seed: Optional[int] = 42,
    policy: str = "random",
    max_steps: int = 3600,
    verbose: int = 1,
    **env_kwargs,
) -> Dict[str, Any]:
    """Run one headless episode with a random or idle policy"""
    if policy not in ("random", "idle"):
        raise ValueError(f"Unknown policy: {policy}")

    env = SurvivalEnv(max_steps=max_steps, **env_kwargs)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        if policy == "random":
            action = env.action_space.sample()
        else:
            action = np.array([1, 1])
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if verbose > 1 and info["step"] % 300 == 0:
            print(f"step {info['step']:5d}  hp {info['hp']:4d}  "
                  f"projectiles {info['num_projectiles']:3d}  "
                  f"survived {info['survived']:.1f}s")

    env.close()

    if verbose > 0:
        outcome = "GAME OVER" if info["game_over"] else "time limit"
        print(f"[{policy}] {outcome} after {info['survived']:.1f}s, "
              f"hp {info['hp']}, hits {info['hits_taken']}, return {total:.2f}")

    return {"return": total, **info}


def run_realtime_session(
    seed: Optional[int] = 42,
    policy: str = "random",
    duration: float = 10.0,
    frame_time: float = 1 / 60,
    verbose: int = 1,
    now=time.monotonic,
    sleep=time.sleep,
    **sim_kwargs,
) -> Dict[str, Any]:
    """
    Drive the simulation from a wall-clock frame loop.

    Each frame waits frame_time, takes the clamped delta from a FrameClock and
    steps with the intent held in an InputState. The random policy re-presses
    keys every few frames. Stops at game over or once duration seconds of
    simulated time have passed.
    """
    if policy not in ("random", "idle"):
        raise ValueError(f"Unknown policy: {policy}")

    sim = Simulation(rng=seed, **sim_kwargs)
    policy_rng = np.random.default_rng(None if seed is None else seed + 1)
    keys = InputState()
    clock = FrameClock(start=now())
    frames = 0

    while not sim.game_over and sim.survived < duration:
        sleep(frame_time)
        dt = clock.tick(now())

        if policy == "random" and frames % 15 == 0:
            for direction in DIRECTIONS:
                if policy_rng.random() < 0.5:
                    keys.press(direction)
                else:
                    keys.release(direction)

        sim.step(dt, keys.intent())
        frames += 1

    snap = sim.snapshot()
    if verbose > 0:
        outcome = "GAME OVER" if snap.game_over else "time limit"
        print(f"[realtime {policy}] {outcome} after {snap.survived:.1f}s, "
              f"hp {snap.player.hp}/{snap.player.max_hp}, "
              f"projectiles {snap.projectile_count}, fps {clock.fps:.0f}")

    return {
        "survived": snap.survived,
        "hp": snap.player.hp,
        "game_over": snap.game_over,
        "num_projectiles": snap.projectile_count,
        "frames": frames,
        "fps": clock.fps,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a headless arena survival episode")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument(
        "--policy",
        type=str,
        default="random",
        choices=["random", "idle"],
        help="Movement policy (default: random)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=3600,
        help="Step budget at 30 steps per second (default: 3600)",
    )
    parser.add_argument(
        "--realtime",
        action="store_true",
        help="Step on wall-clock frames instead of a fixed dt",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=10.0,
        help="Seconds to run in realtime mode (default: 10)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=1)
    parser.add_argument("-q", "--quiet", action="store_true")
    args = parser.parse_args(argv)
    verbose = 0 if args.quiet else args.verbose

    if args.realtime:
        return run_realtime_session(
            seed=args.seed,
            policy=args.policy,
            duration=args.duration,
            verbose=verbose,
        )

    return run_random_episode(
        seed=args.seed,
        policy=args.policy,
        max_steps=args.max_steps,
        verbose=verbose,
    )


if __name__ == "__main__":
    main()
