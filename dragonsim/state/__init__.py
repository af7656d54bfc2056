"""Validated state transitions for the pen and the drawing session.

Exports:
    StateMachine: Finite state machine that rejects transitions outside its graph
    Action: Allowed transition into a target state, with an optional effect
    StateGraph: Mapping of each state to the actions allowed from it
    ActionFn: Signature of an action effect
"""

from .state_machine import Action, ActionFn, StateGraph, StateMachine

__all__ = ["StateMachine", "Action", "StateGraph", "ActionFn"]
