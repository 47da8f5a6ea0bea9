"""Movement definitions."""

from dataclasses import dataclass


@dataclass
class Movement:
    """A named exercise definition.

    ``id`` is left as None for new movements so SQLite assigns the
    primary key on insert.
    """

    name: str
    is_upper: bool = False
    require_weight: bool = False
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "is_upper": int(self.is_upper),
            "require_weight": int(self.require_weight),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Movement":
        """Create from a storage row dictionary."""
        return cls(
            id=data.get("id"),
            name=data["name"],
            is_upper=bool(data.get("is_upper")),
            require_weight=bool(data.get("require_weight")),
        )

    def get_summary(self) -> str:
        """One-line human readable description."""
        body = "upper body" if self.is_upper else "lower body"
        weight = "weighted" if self.require_weight else "bodyweight"
        return f"{self.name} ({body}, {weight})"
