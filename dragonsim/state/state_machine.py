"""Finite state machine with an explicit transition graph.

The graph maps each state to the :class:`Action` values reachable from it. An
action names its target state and may carry an effect, run after the machine
has moved. Requesting a target that is not listed for the current state raises
``ValueError`` and leaves the machine where it was.

Used by :class:`dragonsim.pen.TurtleState` for the pen (UP ⇄ DOWN) and by
:class:`dragonsim.pen.TurtleExecutor` for the drawing session lifecycle.

Example:
    >>> pen = StateMachine(PenState.DOWN, {
    ...     PenState.UP: [Action(PenState.DOWN)],
    ...     PenState.DOWN: [Action(PenState.UP)],
    ... })
    >>> pen.request_transition(PenState.UP)
    >>> pen.current
    <PenState.UP: 1>
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

ActionFn = Callable[..., Any]

StateGraph = dict[Enum, Iterable["Action"]]


@dataclass(frozen=True)
class Action:
    """An allowed transition into ``state``, with an optional side effect."""

    state: Enum
    effect: ActionFn | None = None

    def __call__(self, *args, **kwargs) -> Any:
        if self.effect is None:
            return None
        return self.effect(*args, **kwargs)


class StateMachine:
    """Tracks one current state and only moves along the edges of its graph.

    Attributes:
        current (Enum): The state the machine is in.
    """

    def __init__(self, initial_state: Enum, graph: StateGraph):
        self._state = initial_state
        self._graph = graph

    @property
    def current(self) -> Enum:
        return self._state

    def can_transition(self, next_state: Enum) -> bool:
        return self._find_action(next_state) is not None

    def request_transition(self, next_state: Enum, *args, **kwargs) -> Any:
        """Move to ``next_state`` and run the effect of the matching action.

        Extra arguments are passed to the effect.

        Returns:
            Whatever the effect returns, None when the action has no effect.

        Raises:
            ValueError: If the graph has no edge from the current state to
                ``next_state``.
        """
        action = self._find_action(next_state)
        if action is None:
            msg = f"Illegal transition {self._state.name} → {next_state.name}"
            raise ValueError(msg)

        self._state = action.state
        return action(*args, **kwargs)

    def _find_action(self, next_state: Enum) -> Action | None:
        for action in self._graph.get(self._state, ()):
            if action.state is next_state:
                return action
        return None

    def __repr__(self) -> str:
        return f"StateMachine(current={self._state.name})"
