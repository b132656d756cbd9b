"""URL template expansion.

Templates use shell-like ``$NAME`` and ``${NAME}`` references:

    - ``$NAME`` where NAME is a run of letters, digits and underscores
    - ``$X`` where X is one of ``* # $ @ ! ? -`` or a single digit
    - ``${NAME}`` where NAME is anything up to the closing brace
    - ``${}`` and an unterminated ``${`` are invalid and dropped
    - a ``$`` not followed by a name is kept as-is

Expansion is a single pass: replacement text is never expanded again.
"""

from __future__ import annotations

import re
from typing import Callable

_REFERENCE = re.compile(
    r"\$(?:"
    r"\{(?P<braced>[^}]*)\}"
    r"|(?P<unterminated>\{)"
    r"|(?P<special>[*#$@!?\-0-9])"
    r"|(?P<name>[A-Za-z0-9_]+)"
    r")"
)


def expand_url_template(template: str, mapping: Callable[[str], str]) -> str:
    """Replace variable references in template using mapping.

    Args:
        template: Text containing $NAME / ${NAME} references.
        mapping: Called with each referenced name, returns its replacement.

    Returns:
        The expanded text.

    Example:
        >>> expand_url_template("v$VERSION/${OS}.tgz", {"VERSION": "1.0", "OS": "linux"}.get)
        'v1.0/linux.tgz'
    """

    def replace(match: re.Match[str]) -> str:
        if match.group("unterminated") is not None:
            return ""
        name = match.group("braced")
        if name is None:
            name = match.group("special") or match.group("name")
        if not name:
            return ""
        return mapping(name) or ""

    return _REFERENCE.sub(replace, template)
