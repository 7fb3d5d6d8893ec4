"""Token budget model."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .context import Category


class Budget(BaseModel):
    """A total token capacity split into reserves and per-category sub-budgets.

    The planner may under-allocate because of integer flooring, but the
    reserves plus the four sub-budgets never exceed ``total``.
    """

    total: int = Field(ge=0)
    system_prompt_reserve: int = Field(default=0, ge=0)
    response_reserve: int = Field(default=0, ge=0)
    conversation: int = Field(default=0, ge=0)
    memory: int = Field(default=0, ge=0)
    lesson: int = Field(default=0, ge=0)
    entity: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_allocations(self) -> Self:
        allocated = self.system_prompt_reserve + self.response_reserve + self.allocated
        if allocated > self.total:
            msg = f"Allocated tokens ({allocated}) exceed total budget ({self.total})"
            raise ValueError(msg)
        return self

    @property
    def allocated(self) -> int:
        """Sum of the four category sub-budgets."""
        return self.conversation + self.memory + self.lesson + self.entity

    @property
    def available(self) -> int:
        """Tokens left once both reserves are taken out of the total."""
        return self.total - self.system_prompt_reserve - self.response_reserve

    def for_category(self, category: Category) -> int:
        """Get the sub-budget for a content category."""
        return int(getattr(self, category.value))
