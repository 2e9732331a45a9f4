"""gitline: a powerline-style bash prompt with git repository status.

Typical use, in ``~/.bashrc``::

    PROMPT_COMMAND='PS1="$(gitline $?)"'

The prompt is written once to standard output as a single line of bash
prompt text, with control sequences wrapped in ``\\[`` / ``\\]`` and any
``$`` or ``\\`` in directory or branch names escaped.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
