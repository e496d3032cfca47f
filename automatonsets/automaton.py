"""Finite automata given as a five-part text: states, alphabet, transitions, start, accepting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from automatonsets.setlist import ElementSet, format_element, format_list, parse_list, parse_set


class AutomatonFormatError(ValueError):
    """Raised when the text of an automaton cannot be parsed."""


class Component(IntEnum):
    """The five parts of an automaton, numbered as in the query menu."""

    STATES = 1
    ALPHABET = 2
    TRANSITIONS = 3
    INITIAL = 4
    ACCEPTING = 5

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Component.STATES: "Q: set of states",
    Component.ALPHABET: "Alphabet",
    Component.TRANSITIONS: "Transition function",
    Component.INITIAL: "Initial state",
    Component.ACCEPTING: "Accepting states",
}


@dataclass(frozen=True)
class Automaton:
    """An automaton: its states, alphabet, transitions, initial and accepting states."""

    states: ElementSet
    alphabet: ElementSet
    transitions: ElementSet
    initial: str
    accepting: ElementSet

    def component(self, option: int) -> ElementSet | str:
        """Return the part selected by a menu option from 1 to 5."""
        try:
            part = Component(option)
        except ValueError:
            raise ValueError(f"invalid option: {option!r}") from None
        return {
            Component.STATES: self.states,
            Component.ALPHABET: self.alphabet,
            Component.TRANSITIONS: self.transitions,
            Component.INITIAL: self.initial,
            Component.ACCEPTING: self.accepting,
        }[part]

    def describe(self, option: int) -> str:
        """Text shown when the part selected by a menu option is queried."""
        return "Queried element:\n" + format_element(self.component(option))

    def __str__(self) -> str:
        return format_list(
            [self.states, self.alphabet, self.transitions, self.initial, self.accepting]
        )


def _take_braced(text: str, what: str) -> tuple[str, str]:
    text = text.lstrip()
    if not text.startswith("{"):
        raise AutomatonFormatError(f"expected '{{' at the start of the {what}")
    end = text.find("}")
    if end == -1:
        raise AutomatonFormatError(f"missing '}}' after the {what}")
    return text[1:end], text[end + 1:]


def _skip_comma(text: str, what: str) -> str:
    text = text.lstrip()
    if not text.startswith(","):
        raise AutomatonFormatError(f"expected ',' after the {what}")
    return text[1:]


def parse_transitions(text: str) -> ElementSet:
    """Parse transitions such as "[q0,0,q1],[q1,1,q0]" (optionally in braces)."""
    rest = text.strip()
    if rest.startswith("{") and rest.endswith("}"):
        rest = rest[1:-1].strip()
    transitions = ElementSet()
    while rest:
        if not rest.startswith("["):
            raise AutomatonFormatError("expected '[' at the start of a transition")
        end = rest.find("]")
        if end == -1:
            raise AutomatonFormatError("missing ']' after a transition")
        transitions.add(parse_list(rest[1:end]))
        rest = rest[end + 1:].lstrip()
        if rest.startswith(","):
            rest = rest[1:].lstrip()
    return transitions


def parse_automaton(text: str) -> Automaton:
    """Parse "{states},{alphabet},{transitions},initial,{accepting}"."""
    states_text, rest = _take_braced(text, "set of states")
    rest = _skip_comma(rest, "set of states")
    alphabet_text, rest = _take_braced(rest, "alphabet")
    rest = _skip_comma(rest, "alphabet")
    transitions_text, rest = _take_braced(rest, "transitions")
    rest = _skip_comma(rest, "transitions")
    initial, comma, rest = rest.partition(",")
    initial = initial.strip()
    if not comma:
        raise AutomatonFormatError("expected ',' after the initial state")
    if not initial:
        raise AutomatonFormatError("the initial state is empty")
    accepting_text, rest = _take_braced(rest, "accepting states")
    if rest.strip():
        raise AutomatonFormatError(f"unexpected text after the automaton: {rest.strip()!r}")
    return Automaton(
        states=parse_set(states_text),
        alphabet=parse_set(alphabet_text),
        transitions=parse_transitions(transitions_text),
        initial=initial,
        accepting=parse_set(accepting_text),
    )