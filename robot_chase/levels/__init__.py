from .field import create_field, field_from_positions

__all__ = ["create_field", "field_from_positions"]
