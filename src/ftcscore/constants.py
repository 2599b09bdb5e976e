from __future__ import annotations

# Possession stacks
STACK_CAPACITY = 63

# Field geometry
FIELD_ROWS = 5
FIELD_COLUMNS = 5

# Placeholder team ids count down from here
ANONYMOUS_TEAM_START = -1
