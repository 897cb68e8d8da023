from enum import Enum


class CoverageType(str, Enum):
    LIABILITY = "LIABILITY"
    STANDARD = "STANDARD"
    FULL = "FULL"

    def __str__(self):
        return self.value
