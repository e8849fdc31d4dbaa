from .required_fields import RequiredFieldsCheck

__all__ = [
    "RequiredFieldsCheck",
]
