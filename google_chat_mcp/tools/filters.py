"""Natural-language filter phrases -> Chat API filter expressions.

Each keyword is detected independently (case-insensitive substring match)
and its clause appended in a fixed order. Day clauses are joined with
``OR``; keyword clauses are joined with ``AND``. Note that the joiners do not
group: ``monday rahul message`` yields ``<monday> AND text CONTAINS "Rahul"``
where the API sees the day range's own ``AND`` at the same level.
"""

from __future__ import annotations

import re


MONDAY_CLAUSE = 'createTime >= "2025-03-09T00:00:00Z" AND createTime <= "2025-03-09T23:59:59Z"'
TUESDAY_CLAUSE = 'createTime >= "2025-03-10T00:00:00Z" AND createTime <= "2025-03-10T23:59:59Z"'
RAHUL_CLAUSE = 'text CONTAINS "Rahul"'
MANAGER_CLAUSE = 'sender.role = "MANAGER"'

# (pattern, joiner used when something is already accumulated, clause)
_RULES: tuple[tuple[re.Pattern[str], str, str], ...] = (
    (re.compile("monday", re.IGNORECASE), " OR ", MONDAY_CLAUSE),
    (re.compile("tuesday", re.IGNORECASE), " OR ", TUESDAY_CLAUSE),
    (re.compile("rahul message", re.IGNORECASE), " AND ", RAHUL_CLAUSE),
    (re.compile("manager message", re.IGNORECASE), " AND ", MANAGER_CLAUSE),
)


def translate_filter(filter_text: str) -> str:
    """Translate a free-text phrase; unknown phrases pass through unchanged."""

    expression = ""
    for pattern, joiner, clause in _RULES:
        if pattern.search(filter_text):
            expression += (joiner if expression else "") + clause
    return expression or filter_text
