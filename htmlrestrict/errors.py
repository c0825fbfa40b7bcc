class RestrictError(Exception):
    pass


class InvalidInputError(RestrictError, TypeError):
    kind = "INVALID_INPUT"

    def __init__(self, value):
        self.value = value
        super().__init__(f"{self.kind}: expected str content, got {type(value).__name__}")
