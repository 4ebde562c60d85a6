class LinkNotFoundError(LookupError):
    """No Link matches the given short code or id."""

    def __init__(self, key):
        super().__init__(f"Link not found: {key}")
        self.key = key


class ShortCodeExhaustedError(RuntimeError):
    """Every candidate short code drawn within the attempt budget was taken."""

    def __init__(self, attempts: int):
        super().__init__(f"Failed to generate unique short code after {attempts} attempts")
        self.attempts = attempts
