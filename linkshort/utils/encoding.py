import secrets

# Base36 alphabet (lowercase only, URL-safe)
ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def generate_short_code(length: int) -> str:
    """Generate a cryptographically secure random lowercase base36 code."""
    if length < 1:
        raise ValueError("short code length must be positive")
    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def is_valid_short_code(code: str) -> bool:
    return bool(code) and all(ch in ALPHABET for ch in code)
