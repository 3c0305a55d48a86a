"""Configuration models and YAML loader for the selector catalog."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

COMBINATORS: tuple[str, ...] = (" ", ">", "+", "~")


class SelectorDefinition(BaseModel):
    """Fragments of a single named selector."""

    element: str | None = None
    id: str | None = None
    classes: list[str] = Field(default_factory=list)
    attrs: list[str] = Field(default_factory=list)
    pseudo_classes: list[str] = Field(default_factory=list)
    pseudo_element: str | None = None

    @model_validator(mode="after")
    def at_least_one_fragment(self) -> "SelectorDefinition":
        if not any((
            self.element,
            self.id,
            self.classes,
            self.attrs,
            self.pseudo_classes,
            self.pseudo_element,
        )):
            msg = "selector must define at least one fragment"
            raise ValueError(msg)
        return self


class Combination(BaseModel):
    """Two named selectors joined by a combinator."""

    name: str
    left: str
    combinator: str
    right: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "combination name must not be empty"
            raise ValueError(msg)
        return v.strip()

    @field_validator("combinator")
    @classmethod
    def combinator_allowed(cls, v: str) -> str:
        # " " is the descendant combinator, so no stripping here
        if v not in COMBINATORS:
            msg = f"combinator must be one of {list(COMBINATORS)}, got '{v}'"
            raise ValueError(msg)
        return v


class Settings(BaseModel):
    """Top-level selector catalog loaded from YAML."""

    selectors: dict[str, SelectorDefinition] = Field(
        default_factory=dict, validate_default=True,
    )
    combinations: list[Combination] = Field(default_factory=list)

    @field_validator("selectors")
    @classmethod
    def at_least_one_selector(
        cls, v: dict[str, SelectorDefinition],
    ) -> dict[str, SelectorDefinition]:
        if not v:
            msg = "at least one selector must be configured"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def references_resolve(self) -> "Settings":
        known = set(self.selectors)
        for combo in self.combinations:
            if combo.name in known:
                msg = f"combination name '{combo.name}' is already defined"
                raise ValueError(msg)
            for ref in (combo.left, combo.right):
                if ref not in known:
                    msg = f"combination '{combo.name}' references unknown selector '{ref}'"
                    raise ValueError(msg)
            known.add(combo.name)
        return self

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        try:
            raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in {path}: {e}"
            raise ValueError(msg) from e
        return cls.model_validate(raw)
