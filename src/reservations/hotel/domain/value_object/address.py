from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """住所"""

    street: str
    city: str
    state_or_province: str = ""
    postal_code: str = ""
    country: str = ""

    def __str__(self) -> str:
        parts = [
            self.street,
            self.city,
            self.state_or_province,
            self.postal_code,
            self.country,
        ]
        return ", ".join(part for part in parts if part)
