from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, List, Mapping

from jsonschema import Draft7Validator

from .exceptions import PipelineConfigurationError

SCHEMA_RESOURCE = "pipeline-configuration.schema.json"


@lru_cache(maxsize=1)
def load_pipeline_schema() -> Dict[str, Any]:
    """The JSON schema of the analysis pipeline configuration."""
    text = resources.files(__package__).joinpath("schemas").joinpath(SCHEMA_RESOURCE).read_text(encoding="utf-8")
    return json.loads(text)


def _format_error(error) -> str:
    location = "/".join(str(p) for p in error.absolute_path) or "<root>"
    return f"{location}: {error.message}"


def validate_pipeline_configuration(config: Mapping[str, Any]) -> None:
    """
    Check a pipeline configuration against the schema.

    Raises PipelineConfigurationError carrying every violation found.
    """
    validator = Draft7Validator(load_pipeline_schema())
    errors: List[str] = [
        _format_error(e) for e in sorted(validator.iter_errors(config), key=lambda e: [str(p) for p in e.absolute_path])
    ]
    if errors:
        raise PipelineConfigurationError(
            "Invalid pipeline configuration: " + "; ".join(errors), errors
        )
