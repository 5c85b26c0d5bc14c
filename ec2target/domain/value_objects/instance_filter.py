from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class InstanceFilter:
    """
    Value Object for one server-side DescribeInstances filter.
    """
    name: str
    values: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Filter name cannot be empty")
        if not self.values:
            raise ValueError(f"Filter {self.name!r} needs at least one value")

    @staticmethod
    def of(name: str, *values: str) -> "InstanceFilter":
        return InstanceFilter(name=name, values=tuple(values))

    def to_api(self) -> dict[str, Any]:
        """Return the filter in the EC2 API wire shape."""
        return {"Name": self.name, "Values": list(self.values)}

    def __str__(self) -> str:
        return f"{self.name}={','.join(self.values)}"
