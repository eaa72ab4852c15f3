"""Arena survival module - top-down projectile dodging simulation"""

from .simulation import Simulation, WorldSnapshot, MAX_DT
from .controls import InputState, FrameClock
from .survival_env import SurvivalEnv, run_random_episode, run_realtime_session

__all__ = [
    'Simulation', 'WorldSnapshot', 'MAX_DT',
    'InputState', 'FrameClock',
    'SurvivalEnv', 'run_random_episode', 'run_realtime_session',
]
