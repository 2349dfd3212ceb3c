class InvalidValueError(ValueError):
    """Raised when a string is not one of the values accepted by a closed enum."""

    def __init__(self, value: str, options: list[str]) -> None:
        self.value = value
        self.options = options
        super().__init__(f"must be one of {_join_options(options)}")


def _join_options(options: list[str]) -> str:
    quoted = [f'"{option}"' for option in options]
    if len(quoted) == 1:
        return quoted[0]
    return f"{', '.join(quoted[:-1])} or {quoted[-1]}"
