"""FoodItem domain entity: identifier, display name and expiration date."""
from datetime import date, datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from fridge.utilities.constants import ISO_DATE_FORMAT, DISPLAY_DATE_FORMAT


class FoodItem:
    def __init__(self, name: str, expiration_date: date, id: Optional[UUID] = None):
        if isinstance(expiration_date, datetime):
            expiration_date = expiration_date.date()
        self._id = id if id is not None else uuid4()
        self.name = name
        self.expiration_date = expiration_date

    @property
    def id(self) -> UUID:
        '''The identifier is fixed at creation; it doubles as the reminder key.'''
        return self._id

    def matches(self, item_id: Union[UUID, str]) -> bool:
        '''True if this item carries the given id (UUID or its string form).'''
        if isinstance(item_id, UUID):
            return self._id == item_id
        try:
            return self._id == UUID(str(item_id))
        except ValueError:
            return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, FoodItem):
            return NotImplemented
        return (self._id, self.name, self.expiration_date) == (other._id, other.name, other.expiration_date)

    def __hash__(self) -> int:
        return hash((self._id, self.name, self.expiration_date))

    def __str__(self) -> str:
        return f"{self.name} - Exp: {self.expiration_date.strftime(DISPLAY_DATE_FORMAT)}"

    def __repr__(self) -> str:
        return f"FoodItem(id={self._id!s}, name={self.name!r}, expiration_date={self.expiration_date.isoformat()})"

    @staticmethod
    def from_dict(data):
        '''Creates a FoodItem from its stored form. Raises ValueError/TypeError/KeyError on malformed input.'''
        if not isinstance(data, dict):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")
        for key in ("id", "name", "expirationDate"):
            if not isinstance(data[key], str):
                raise TypeError(f"FoodItem {key} must be a string")
        return FoodItem(
            id=UUID(data["id"]),
            name=data["name"],
            expiration_date=datetime.strptime(data["expirationDate"], ISO_DATE_FORMAT).date(),
        )

    def to_dict(self):
        '''Converts the FoodItem to a dictionary for JSON persistence.'''
        return {
            "id": str(self._id),
            "name": self.name,
            "expirationDate": self.expiration_date.strftime(ISO_DATE_FORMAT),
        }
