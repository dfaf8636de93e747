"""Selection of combat actions by weight and subgoals by utility."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from typing import Any, Optional, Protocol

from goalai.actions import CombatAction, SubgoalAction

logger = logging.getLogger(__name__)


class _UniformSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


def select_combat_action(
    actions: Iterable[Optional[CombatAction]],
    rng: Optional[_UniformSource] = None,
) -> Optional[CombatAction]:
    """Pick an action at random, each with probability proportional to its weight.

    Missing (``None``) entries are skipped. Returns ``None`` when there are no
    actions or their total weight is not positive.
    """
    candidates = [action for action in actions if action is not None]
    if not candidates:
        logger.warning("CombatWheel: No combat actions provided.")
        return None

    total_weight = sum(action.weight for action in candidates)
    if total_weight <= 0.0:
        logger.warning("CombatWheel: Total weight is zero or negative.")
        return None

    roll = (rng if rng is not None else random).uniform(0.0, total_weight)
    cumulative = 0.0
    for action in candidates:
        cumulative += action.weight
        if roll <= cumulative:
            return action
    return None


def select_best_subgoal(
    actions: Iterable[Optional[SubgoalAction]], agent: Any
) -> Optional[SubgoalAction]:
    """Return the subgoal with the highest utility for ``agent``.

    Ties go to the earliest subgoal; utilities of -1 or less never win.
    """
    candidates = [action for action in actions if action is not None]
    if not candidates:
        logger.warning("UtilityAI: No subgoal actions provided.")
        return None

    best_utility = -1.0
    best: Optional[SubgoalAction] = None
    for action in candidates:
        utility = action.calculate_utility(agent)
        logger.info("Evaluated subgoal %s with utility %.2f", action.name, utility)
        if utility > best_utility:
            best_utility = utility
            best = action

    if best is not None:
        logger.info("Selected best subgoal: %s (Utility: %.2f)", best.name, best_utility)
    else:
        logger.warning("UtilityAI: No valid subgoal actions found.")
    return best