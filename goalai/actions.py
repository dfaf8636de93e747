"""Combat and subgoal actions that a goal-driven agent can carry out."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from goalai.agent import GoalAgent


@dataclass(eq=False)
class CombatAction:
    """A weighted combat action picked at random by the combat wheel.

    Subclasses override the hooks to give the action its behaviour. The
    default hooks keep track of how long the action has been running.
    """

    name: str = "DefaultCombatAction"
    weight: float = 1.0
    elapsed: float = field(default=0.0, init=False, repr=False)

    def combat_start(self, agent: GoalAgent) -> None:
        """Run once when the action is selected; restarts the elapsed time."""
        self.elapsed = 0.0

    def combat_tick(self, agent: GoalAgent, delta_time: float) -> None:
        """Run on every agent tick while the action runs; adds to the elapsed time."""
        self.elapsed += delta_time


@dataclass(eq=False)
class SubgoalAction:
    """A subgoal with a turn cost, chosen by its utility score.

    Subclasses override the hooks and the utility calculation. By default
    the utility is the ``utility`` attribute, which starts at zero.
    """

    name: str = "DefaultAction"
    cost: int = 0
    utility: float = field(default=0.0, init=False, repr=False)
    elapsed: float = field(default=0.0, init=False, repr=False)

    def start_subgoal(self, agent: GoalAgent) -> None:
        """Run once when the subgoal is selected; restarts the elapsed time."""
        self.elapsed = 0.0

    def tick_subgoal(self, agent: GoalAgent, delta_time: float) -> None:
        """Run on every agent tick while the subgoal runs; adds to the elapsed time."""
        self.elapsed += delta_time

    def calculate_utility(self, agent: GoalAgent) -> float:
        """Return how useful this subgoal is to the agent right now."""
        return float(self.utility)