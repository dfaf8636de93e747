# goalai

goalai is a small AI loop for game agents that does not depend on any engine. Each agent repeats one cycle:

1. **Combat action.** One `CombatAction` is picked at random. The chance of each action is its `weight` divided by the total weight.
2. **Subgoals.** `SubgoalAction`s then run one after another. Each time, the one with the highest utility is picked. This goes on until the summed `cost` of the subgoals that ran reaches the agent's `turn_limit`, or until no subgoal can be picked.
3. **Idle.** The agent returns to `AgentState.IDLE` and the cycle starts again.

## Installation

```
pip install .
```

## Defining behaviour

`goalai.actions` provides two dataclasses:

- `CombatAction(name="DefaultCombatAction", weight=1.0)`
- `SubgoalAction(name="DefaultAction", cost=0)`

Their default hooks only keep count of time. `combat_start` and `start_subgoal` set `elapsed` to `0.0`. `combat_tick` and `tick_subgoal` add `delta_time` to it. `SubgoalAction.calculate_utility` returns the `utility` attribute, which starts at `0.0`. To give actions real behaviour, subclass them and override the hooks:

```python
from goalai.actions import CombatAction, SubgoalAction


class Slash(CombatAction):
    def combat_tick(self, agent, delta_time):
        super().combat_tick(agent, delta_time)
        if self.elapsed >= 0.5:
            agent.combat_action_complete = True


class Retreat(SubgoalAction):
    def calculate_utility(self, agent):
        return 0.8

    def tick_subgoal(self, agent, delta_time):
        agent.subgoal_complete = True
```

An action reports that it has finished by setting `agent.combat_action_complete` or `agent.subgoal_complete` to `True`.

## Running agents

```python
import random

from goalai.actions import CombatAction, SubgoalAction
from goalai.agent import GoalAgent
from goalai.subsystem import GoalAISubsystem

agent = GoalAgent(
    "grunt",
    combat_actions=[Slash("slash", 2.0), CombatAction("feint", 1.0)],
    subgoal_actions=[Retreat("retreat", 1), SubgoalAction("wait", 1)],
    turn_limit=3,
)
agent.begin_play()

system = GoalAISubsystem([agent], rng=random.Random(42), active=True)

for _ in range(100):
    system.tick(1 / 60)   # moves the agent to its next state
    agent.tick(1 / 60)    # drives the running action
```

- `GoalAgent.begin_play()` raises a negative `turn_limit` to `0`, then calls `reset()`.
- `GoalAgent.reset()` puts the agent back in the `IDLE` state with no action running and `turn_count` set to `0`.
- `GoalAgent.tick(delta_time)` passes the frame to the running combat action or subgoal, but only while that action has not finished.
- `GoalAISubsystem.tick(delta_time)` calls `process_agent` once for each agent, and skips `None` entries. If `active` is false it does nothing, as an editor or preview world would.
- `process_agent` behaves as follows in each state:
  - `IDLE`: starts a combat action.
  - `EXECUTING_COMBAT_ACTION`: once the action is complete, starts the subgoals. If the agent has no subgoals, it goes back to idle.
  - `EXECUTING_SUBGOALS`: once a subgoal is complete, charges that subgoal's cost to `turn_count` and starts the next one, or finishes.
- The methods `begin_combat_action`, `begin_subgoals` and `advance_subgoal` can also be called directly.
- `rng` may be any object that has a `uniform(a, b)` method. If it is `None`, the `random` module is used.

## Selection helpers

`goalai.selection` provides the two selection rules as separate functions:

- `select_combat_action(actions, rng=None)`: weighted random pick. `None` entries are skipped. It returns `None` if no actions are left or if their total weight is not positive.
- `select_best_subgoal(actions, agent)`: returns the subgoal with the highest `calculate_utility(agent)`. On a tie the earlier subgoal wins. A utility of `-1.0` or lower is never picked.

Both functions log their decisions through the standard `logging` module.

## What it does not do

goalai contains only the decision logic. It has no rendering, physics, movement or world of its own, and no command-line tool. Your game loop has to create the agents, call both `tick` methods each frame, and put the behaviour that actions carry out into your action subclasses.

## Running the tests

```
pip install .[test]
pytest
```