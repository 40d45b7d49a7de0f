"""Value iteration and policy iteration for a stochastic grid-world MDP, with text tables and convergence plots."""

__version__ = "0.1.0"