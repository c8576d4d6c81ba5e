"""pocketcalc — four-function arithmetic expression evaluator.

Reads one line such as ``34+5*12-311/8``, checks it against a small
alphabet (digits, '.', space, + - * /) and evaluates it by repeatedly
splitting on the loosest operator. Order of operations is / * - +.
No parentheses, no negative numbers.

Usage:
    python -m pocketcalc repl                    # Interactive session
    python -m pocketcalc eval "34+5*12-311/8"    # One-shot evaluation
    python -m pocketcalc explain "2+3*4-5/5"     # Show the split tree
"""

__version__ = "0.1.0"
