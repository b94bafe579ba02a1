from __future__ import annotations

"""Project-wide constants used across modules.

The markers below are part of the textual contract of a bundled script and
are not configurable.
"""

# Two-character prefix of the interpreter-selector line.
SELECTOR_MARKER: str = '#!'

# Exact text of the comment that marks a command substitution for build-time inlining.
INLINE_MARKER: str = '# build: inline'

# Command names recognized as include directives.
SOURCE_COMMANDS: frozenset[str] = frozenset({'source', '.'})

# Trailing separator written after every inlined file.
SECTION_FOOTER: str = '#########'

DEFAULT_SHELL: str = 'bash'
