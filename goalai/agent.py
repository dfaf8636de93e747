"""A goal-driven agent that runs combat actions followed by subgoals."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Optional

from goalai.actions import CombatAction, SubgoalAction


class AgentState(Enum):
    """Phase of an agent's decision cycle."""

    IDLE = "idle"
    EXECUTING_COMBAT_ACTION = "executing_combat_action"
    EXECUTING_SUBGOALS = "executing_subgoals"


class GoalAgent:
    """Holds an agent's actions and decision state and drives the running action."""

    def __init__(
        self,
        name: str = "GoalAgent",
        combat_actions: Optional[Iterable[Optional[CombatAction]]] = None,
        subgoal_actions: Optional[Iterable[Optional[SubgoalAction]]] = None,
        turn_limit: int = 3,
    ) -> None:
        self.name = name
        self.combat_actions: list[Optional[CombatAction]] = list(combat_actions or [])
        self.subgoal_actions: list[Optional[SubgoalAction]] = list(subgoal_actions or [])
        self.turn_limit = turn_limit
        self.reset()

    def reset(self) -> None:
        """Return the agent to an idle state with nothing running."""
        self.current_combat_action: Optional[CombatAction] = None
        self.current_subgoal: Optional[SubgoalAction] = None
        self.combat_action_complete = True
        self.subgoals_complete = False
        self.state = AgentState.IDLE
        self.turn_count = 0
        self.subgoal_complete = False

    def begin_play(self) -> None:
        """Prepare the agent for play: clamp the turn limit and reset state."""
        if self.turn_limit < 0:
            self.turn_limit = 0
        self.reset()

    def tick(self, delta_time: float) -> None:
        """Advance whichever action is currently running."""
        if self.state is AgentState.EXECUTING_COMBAT_ACTION:
            if self.current_combat_action is not None and not self.combat_action_complete:
                self.current_combat_action.combat_tick(self, delta_time)
        elif self.state is AgentState.EXECUTING_SUBGOALS:
            if self.current_subgoal is not None and not self.subgoal_complete:
                self.current_subgoal.tick_subgoal(self, delta_time)