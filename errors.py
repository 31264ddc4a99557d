class ConfigError(Exception):
    """Base for every user-facing configuration problem.

    `field` names the offending option so the CLI can point at it.
    """

    def __init__(self, field, message):
        super().__init__(message)
        self.field = field
        self.message = message

    def __str__(self):
        return f"{self.field}: {self.message}"


class MissingRequiredField(ConfigError):
    pass


class InvalidPageSize(ConfigError):
    pass


class InvalidOrientation(ConfigError):
    pass


class ConflictingGridDrivers(ConfigError):
    pass


class InvalidBorderPairing(ConfigError):
    pass


class InvalidGapPairing(ConfigError):
    pass


class UnparseableDimension(ConfigError):
    pass


class GridDoesNotFit(ConfigError):
    pass


class MissingCardImage(ConfigError):
    pass


class InvalidCardImage(ConfigError):
    pass


class OutputNotWritable(ConfigError):
    pass
