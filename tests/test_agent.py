import pytest

from goalai.actions import CombatAction, SubgoalAction
from goalai.agent import AgentState, GoalAgent


class TickCombat(CombatAction):
    def __init__(self):
        super().__init__("tick", 1.0)
        self.ticks = []

    def combat_tick(self, agent, delta_time):
        self.ticks.append((agent, delta_time))


class TickSubgoal(SubgoalAction):
    def __init__(self):
        super().__init__("tick", 1)
        self.ticks = []

    def tick_subgoal(self, agent, delta_time):
        self.ticks.append((agent, delta_time))


def test_new_agent_is_idle():
    agent = GoalAgent()
    assert agent.state is AgentState.IDLE
    assert agent.current_combat_action is None
    assert agent.current_subgoal is None
    assert agent.combat_action_complete is True
    assert agent.subgoals_complete is False
    assert agent.subgoal_complete is False
    assert agent.turn_count == 0


def test_default_turn_limit_and_empty_action_lists():
    agent = GoalAgent()
    assert agent.turn_limit == 3
    assert agent.combat_actions == []
    assert agent.subgoal_actions == []


def test_begin_play_clamps_negative_turn_limit():
    agent = GoalAgent(turn_limit=-5)
    agent.begin_play()
    assert agent.turn_limit == 0


def test_begin_play_keeps_positive_turn_limit_and_resets():
    agent = GoalAgent(turn_limit=4)
    agent.state = AgentState.EXECUTING_SUBGOALS
    agent.turn_count = 2
    agent.begin_play()
    assert agent.turn_limit == 4
    assert agent.state is AgentState.IDLE
    assert agent.turn_count == 0


def test_tick_runs_combat_action():
    action = TickCombat()
    agent = GoalAgent(combat_actions=[action])
    agent.state = AgentState.EXECUTING_COMBAT_ACTION
    agent.current_combat_action = action
    agent.combat_action_complete = False
    agent.tick(0.25)
    assert action.ticks == [(agent, 0.25)]


def test_tick_skips_completed_combat_action():
    action = TickCombat()
    agent = GoalAgent(combat_actions=[action])
    agent.state = AgentState.EXECUTING_COMBAT_ACTION
    agent.current_combat_action = action
    agent.combat_action_complete = True
    agent.tick(0.25)
    assert action.ticks == []


@pytest.mark.parametrize("complete, expected", [(False, 1), (True, 0)])
def test_tick_runs_subgoal_unless_complete(complete, expected):
    subgoal = TickSubgoal()
    agent = GoalAgent(subgoal_actions=[subgoal])
    agent.state = AgentState.EXECUTING_SUBGOALS
    agent.current_subgoal = subgoal
    agent.subgoal_complete = complete
    agent.tick(0.1)
    assert len(subgoal.ticks) == expected


def test_idle_tick_touches_nothing():
    action = TickCombat()
    subgoal = TickSubgoal()
    agent = GoalAgent(combat_actions=[action], subgoal_actions=[subgoal])
    agent.current_combat_action = action
    agent.combat_action_complete = False
    agent.current_subgoal = subgoal
    agent.tick(1.0)
    assert action.ticks == [] and subgoal.ticks == []


def test_reset_clears_running_state():
    action = TickCombat()
    agent = GoalAgent(combat_actions=[action])
    agent.state = AgentState.EXECUTING_COMBAT_ACTION
    agent.current_combat_action = action
    agent.combat_action_complete = False
    agent.subgoal_complete = True
    agent.reset()
    assert agent.state is AgentState.IDLE
    assert agent.current_combat_action is None
    assert agent.combat_action_complete is True
    assert agent.subgoal_complete is False
    assert agent.combat_actions == [action]