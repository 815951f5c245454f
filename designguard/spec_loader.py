"""
Loading and validation of design system specifications.

A specification is user-authored JSON:

```json
{
  "name": "Sample Design System",
  "version": "1.0.0",
  "rules": [
    {"id": "primary-color", "type": "color", "property": "background-color",
     "expectedValue": "#0066FF", "description": "..."}
  ],
  "metadata": {"author": "...", "description": "...", "created": "..."}
}
```

Validation happens here, before anything reaches the evaluator.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .errors import SpecificationError
from .models import DesignSystemDNA, Rule, SpecMetadata
from .utils import now_iso

INVALID_JSON = "Invalid JSON file. Please check the file format."
INVALID_FORMAT = "Invalid design system format. Please check the JSON structure."


def _describe_errors(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def parse_specification(data: Any) -> DesignSystemDNA:
    """Validate decoded JSON as a specification.

    Raises:
        SpecificationError: If the data does not match the schema.
    """
    if not isinstance(data, dict):
        raise SpecificationError(f"{INVALID_FORMAT} Expected an object, got {type(data).__name__}.")

    rules = data.get("rules")
    if not isinstance(rules, list):
        raise SpecificationError(f"{INVALID_FORMAT} 'rules' must be an array.")

    for index, rule in enumerate(rules):
        if not isinstance(rule, dict):
            raise SpecificationError(f"{INVALID_FORMAT} rules.{index} must be an object.")
        if rule.get("expectedValue") is None:
            raise SpecificationError(f"{INVALID_FORMAT} rules.{index}: expectedValue is required.")

    try:
        return DesignSystemDNA.model_validate(data)
    except ValidationError as e:
        raise SpecificationError(f"{INVALID_FORMAT} {_describe_errors(e)}") from e


def loads_specification(text: str) -> DesignSystemDNA:
    """Parse a specification from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SpecificationError(f"{INVALID_JSON} {e}") from e
    return parse_specification(data)


def load_specification(path: Path) -> DesignSystemDNA:
    """Read and validate a specification file.

    Raises:
        SpecificationError: If the file is unreadable, not JSON, or invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SpecificationError(f"Cannot read specification {path}: {e}") from e
    return loads_specification(text)


def sample_specification() -> DesignSystemDNA:
    """The starter specification offered to new users."""
    return DesignSystemDNA(
        name="Sample Design System",
        version="1.0.0",
        rules=[
            Rule(
                id="primary-color",
                kind="color",
                property="background-color",
                expected_value="#0066FF",
                description="Primary buttons should use brand blue",
            ),
            Rule(
                id="heading-font-weight",
                kind="typography",
                property="font-weight",
                expected_value=600,
                tolerance=50,
                description="Headings should be semi-bold",
            ),
            Rule(
                id="button-border-radius",
                kind="layout",
                property="border-radius",
                expected_value="8px",
                description="Buttons should have 8px border radius",
            ),
        ],
        metadata=SpecMetadata(
            author="Design Team",
            description="Sample design system validation rules",
            created=now_iso(),
        ),
    )


def dump_specification(spec: DesignSystemDNA, out_path: Path) -> Path:
    """Write a specification as JSON."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(spec.to_json() + "\n", encoding="utf-8")
    return out_path
