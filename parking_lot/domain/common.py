from enum import Enum


class CarType(str, Enum):
    SMALL = "S"
    REGULAR = "R"
    LARGE = "L"
    ELECTRIC = "E"
    NA = "N"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "CarType":
        """Look up a category by its single-character label.

        Surrounding whitespace is ignored. Raises ValueError for unknown labels.
        """
        try:
            return cls(label.strip())
        except ValueError:
            raise ValueError(f"Unknown car type label: {label!r}") from None
