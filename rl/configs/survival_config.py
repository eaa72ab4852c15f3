"""
Training configuration for the arena survival environment
Reward shaping presets and algorithm hyperparameters
"""

# Environment parameters
ENV_CONFIG = {
    "dt": 1/30,
    "max_steps": 3600,  # 120 seconds at 30 FPS
    "k_projectiles": 8,
    # Smaller arena than the interactive default so episodes stay dense
    "width": 1200.0,
    "height": 1200.0,
    "max_hp": 20,
    "max_projectiles": 64,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# BASELINE: survive, avoid hits
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Balanced survival bonus and hit penalty",
    "R_SURVIVE": 0.01,   # Bonus per step alive
    "R_HIT": 0.5,        # Penalty per hp lost
    "R_DEATH": 5.0,      # Death penalty
}

# CAUTIOUS: every hit hurts a lot
REWARD_CONFIG_CAUTIOUS = {
    "name": "cautious",
    "description": "Heavy hit and death penalties - encourages wide dodging",
    "R_SURVIVE": 0.005,
    "R_HIT": 2.0,
    "R_DEATH": 10.0,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "cautious": REWARD_CONFIG_CAUTIOUS,
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 1024,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}
