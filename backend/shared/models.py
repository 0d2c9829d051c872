"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for wire models.

    The game client and launcher speak camelCase JSON; Python code uses
    snake_case attribute names. Both spellings are accepted on input and
    responses are serialized by alias.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
