from typing import Iterable, List
from urllib.parse import quote


def normalize_states(args: Iterable[str]) -> List[str]:
    """Turn raw command-line state arguments into lowercase, URL-safe tokens.

    Accepts separate arguments as well as a single comma-joined argument,
    e.g. ``["New York,Rhode Island"]`` -> ``["new%20york", "rhode%20island"]``.
    """
    tokens = []
    for arg in args:
        for part in arg.split(','):
            name = ' '.join(part.strip(' \t\n,').split()).lower()
            if not name:
                continue
            tokens.append(quote(name, safe=''))
    return tokens
