from .survival_env import main

main()
