"""Address value object."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """
    Postal address of a customer.

    Compared by value; replace it through Customer.change_address()
    instead of mutating it.
    """
    street: str
    number: int
    zip: str
    city: str

    def __post_init__(self):
        if not self.street:
            raise ValueError("Street is required")
        if not isinstance(self.number, int) or self.number <= 0:
            raise ValueError(f"Number must be a positive integer, got: {self.number}")
        if not self.zip:
            raise ValueError("Zip is required")
        if not self.city:
            raise ValueError("City is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip} {self.city}"
