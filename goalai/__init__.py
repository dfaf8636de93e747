"""Goal-driven game AI: weighted combat actions followed by utility-scored subgoals."""

__version__ = "0.1.0"
__all__ = ["actions", "agent", "selection", "subsystem"]