# automatonsets

Read a finite automaton written in set notation and look at its parts:

```
{q0,q1},{0,1},{[q0,0,q0],[q0,1,q1],[q1,0,q0],[q1,1,q1]},q0,{q1}
```

The five parts are, in order: the set of states, the alphabet, the transition
function (a set of `[state,symbol,state]` lists), the initial state and the set
of accepting states.

## Installation

```
pip install .
```

## Command line

```
automatonsets
```

The command parses an automaton (by default the sample above), prints it, lists
the five parts and asks which one to show:

1. Q: set of states
2. Alphabet
3. Transition function
4. Initial state
5. Accepting states

Options:

- `--automaton TEXT` parses `TEXT` instead of the sample automaton.
- `--option N` shows part `N` without asking.

For example:

```
automatonsets --option 3
automatonsets --automaton "{a,b},{x},{[a,x,b]},a,{b}" --option 5
```

If the automaton text cannot be parsed, or the option is not a number from 1 to
5, a message goes to standard error and the command exits with status 1;
otherwise it exits with status 0.

## Library

```python
from automatonsets.automaton import parse_automaton
from automatonsets.setlist import ElementSet, parse_set

af = parse_automaton("{q0,q1},{0,1},{[q0,0,q0],[q0,1,q1],[q1,0,q0],[q1,1,q1]},q0,{q1}")
print(af)                  # [{q0 q1}{0 1}{[q0 0 q0 ][q0 1 q1 ][q1 0 q0 ][q1 1 q1 ]}q0 {q1}]
print(af.describe(1))      # "Queried element:" and then {q0 q1}
states = af.component(1)   # an ElementSet
af.initial                 # "q0"

a = parse_set("a,b,c")
b = ElementSet(["b", "c", "d"])
print(a.union(b))          # {a b c d}
print(a.intersection(b))   # {b c}
print(a.difference(b))     # {a}
print(a.issubset(b))       # False
```

### `automatonsets.automaton`

- `parse_automaton(text)` parses `{states},{alphabet},{transitions},initial,{accepting}`
  into an `Automaton`; malformed text raises `AutomatonFormatError` (a `ValueError`).
- `parse_transitions(text)` parses `[q0,0,q1],[q1,1,q0]` (optionally in braces)
  into an `ElementSet` of tuples.
- `Automaton` is a frozen dataclass with `states`, `alphabet`, `transitions`,
  `initial` and `accepting`. `component(option)` returns the part numbered 1 to 5
  and raises `ValueError` for any other number; `describe(option)` returns the
  text the command prints for that part.
- `Component` is an `IntEnum` of the five parts; each member has a `label`.

### `automatonsets.setlist`

- `ElementSet` keeps its elements (strings, or tuples of strings) in insertion
  order. It supports `in`, `len`, iteration and equality, plus `union`,
  `intersection`, `difference` and `issubset`. Adding an element that is already
  present raises `DuplicateElementError`.
- `parse_set(text)` splits comma-separated elements, optionally in braces, into
  an `ElementSet`; `parse_list(text)` does the same for a tuple, optionally in
  brackets.
- `format_element(item)` and `format_list(items)` give the text notation used
  in the output: sets as `{a b}`, lists as `[a b ]`.

## What it does not do

The package parses an automaton and shows its parts. It does not run the
automaton on input words, and it does not check that the transitions, initial
state and accepting states refer to declared states and symbols.

## Tests

```
pip install .[test]
pytest
```