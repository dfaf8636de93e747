"""Per-frame driver that moves agents through their decision cycle."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Optional

from goalai.agent import AgentState, GoalAgent
from goalai.selection import select_best_subgoal, select_combat_action

logger = logging.getLogger(__name__)


class GoalAISubsystem:
    """Ticks every registered agent, choosing combat actions and subgoals.

    When ``active`` is false the subsystem does nothing on tick, as when the
    world is not running a game.
    """

    def __init__(
        self,
        agents: Optional[Iterable[Optional[GoalAgent]]] = None,
        rng: Any = None,
        active: bool = True,
    ) -> None:
        self.agents: list[Optional[GoalAgent]] = list(agents or [])
        self.rng = rng
        self.active = active

    def tick(self, delta_time: float) -> None:
        """Process each agent once."""
        if not self.active:
            return
        for agent in list(self.agents):
            self.process_agent(agent)

    def process_agent(self, agent: Optional[GoalAgent]) -> None:
        """Move one agent to its next phase if its current phase allows it."""
        if agent is None:
            return
        if agent.state is AgentState.IDLE:
            self.begin_combat_action(agent)
        elif agent.state is AgentState.EXECUTING_COMBAT_ACTION:
            if agent.combat_action_complete:
                self.begin_subgoals(agent)
        elif agent.state is AgentState.EXECUTING_SUBGOALS:
            if agent.subgoal_complete:
                self.advance_subgoal(agent)

    def begin_combat_action(self, agent: GoalAgent) -> None:
        """Pick a combat action by weight and start it."""
        if not agent.combat_actions:
            return
        chosen = select_combat_action(agent.combat_actions, self.rng)
        if chosen is None:
            return
        agent.current_combat_action = chosen
        agent.state = AgentState.EXECUTING_COMBAT_ACTION
        agent.combat_action_complete = False
        logger.info("Selected Combat Action: %s", chosen.name)
        chosen.combat_start(agent)

    def begin_subgoals(self, agent: GoalAgent) -> None:
        """Start the subgoal phase, or go idle if there are no subgoals."""
        if not agent.subgoal_actions:
            agent.subgoals_complete = True
            agent.state = AgentState.IDLE
            return
        agent.turn_count = 0
        agent.subgoals_complete = False
        agent.state = AgentState.EXECUTING_SUBGOALS
        self.advance_subgoal(agent)

    def advance_subgoal(self, agent: GoalAgent) -> None:
        """Charge the last subgoal's cost, then start the next best subgoal or finish."""
        if agent.current_subgoal is not None:
            agent.turn_count += agent.current_subgoal.cost

        if agent.turn_count >= agent.turn_limit:
            self._finish_subgoals(agent)
            logger.info("Reached turn limit, subgoals complete for %s", agent.name)
            return

        best = select_best_subgoal(agent.subgoal_actions, agent)
        if best is None:
            self._finish_subgoals(agent)
            logger.info("No subgoals available, subgoals complete for %s", agent.name)
            return

        agent.current_subgoal = best
        agent.subgoal_complete = False
        best.start_subgoal(agent)
        logger.info("Started Subgoal: %s", best.name)

    @staticmethod
    def _finish_subgoals(agent: GoalAgent) -> None:
        agent.subgoals_complete = True
        agent.current_subgoal = None
        agent.state = AgentState.IDLE