class HouseholdPowerError(Exception):
    """Base class for fatal errors raised while preparing the dataset."""


class ProvisioningError(HouseholdPowerError):
    """The dataset file could not be downloaded or extracted."""


class RangeNotFoundError(HouseholdPowerError):
    """A boundary key of the requested date range is not in the dataset."""


class TimestampParseError(HouseholdPowerError):

    def __init__(self, row: int, value: str):
        self.row = row
        self.value = value
        super().__init__(
            f"Row {row}: {value!r} does not match 'dd/mm/yyyy HH:MM:SS'"
        )


class SchemaInferenceWarning(UserWarning):
    """The header sample was not enough to type a column."""
