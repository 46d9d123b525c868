"""
Input validation schemas using Pydantic for request bodies of the HTTP API.
"""
from datetime import date
from typing import List

from pydantic import BaseModel, Field, field_validator


class FoodItemInput(BaseModel):
    """Schema for a new food item."""
    name: str = Field(..., min_length=1, max_length=100)
    expiration_date: date

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Remove leading/trailing whitespace and reject blank names."""
        if not v.strip():
            raise ValueError('Food name cannot be empty')
        return v.strip()


class GroceryItemInput(BaseModel):
    """Schema for a new grocery list entry."""
    name: str = Field(..., min_length=1, max_length=100)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Grocery item cannot be empty')
        return v.strip()


class GroceryBulkDeleteInput(BaseModel):
    """Schema for removing several grocery entries by position."""
    positions: List[int] = Field(default_factory=list)


class PromoteGroceryInput(BaseModel):
    """Schema for turning a bought grocery entry into a tracked food item."""
    name: str = Field(..., min_length=1, max_length=100)
    expiration_date: date

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Grocery item cannot be empty')
        return v.strip()


class AuthorizationInput(BaseModel):
    """Schema for granting or revoking reminder permission."""
    granted: bool
