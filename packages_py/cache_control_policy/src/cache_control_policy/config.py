"""
Loading policy configuration from mappings and YAML files.

Expected shape:

    cache_control:
      default: "no-store"
      rules:
        - pattern: "text/html"
          directive: "no-cache"
        - ["image/*", "public, max-age=86400"]
"""
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .directives import validate_directive
from .mime import parse_mime_type_pattern
from .table import DEFAULT_DIRECTIVE
from .types import CacheControlConfigError, CacheControlPolicyConfig, CacheControlPolicyError

logger = logging.getLogger(__name__)


class CacheControlRuleModel(BaseModel):
    """A single rule as found in a config file."""

    pattern: str
    directive: str

    model_config = {"extra": "forbid"}

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("rule must be a [pattern, directive] pair")
            return {"pattern": data[0], "directive": data[1]}
        return data

    @field_validator("pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            parse_mime_type_pattern(value)
        except CacheControlPolicyError as e:
            raise ValueError(str(e)) from e
        return value.strip()

    @field_validator("directive")
    @classmethod
    def _check_directive(cls, value: str) -> str:
        try:
            return validate_directive(value)
        except CacheControlPolicyError as e:
            raise ValueError(str(e)) from e


class CacheControlPolicyModel(BaseModel):
    """Policy section of a config file."""

    default: str = DEFAULT_DIRECTIVE
    rules: Optional[List[CacheControlRuleModel]] = Field(default=None)

    model_config = {"extra": "forbid"}

    @field_validator("default")
    @classmethod
    def _check_default(cls, value: str) -> str:
        try:
            return validate_directive(value)
        except CacheControlPolicyError as e:
            raise ValueError(str(e)) from e

    def to_config(self) -> CacheControlPolicyConfig:
        """Convert to a CacheControlPolicyConfig. Missing rules take the preset."""
        return CacheControlPolicyConfig(
            rules=[(r.pattern, r.directive) for r in self.rules]
            if self.rules is not None
            else None,
            default=self.default,
        )


def load_policy_config(data: Optional[Mapping[str, Any]]) -> CacheControlPolicyConfig:
    """
    Validate a mapping and convert it to a CacheControlPolicyConfig.

    Args:
        data: Mapping with 'default' and 'rules' keys. None yields the preset.

    Raises:
        CacheControlConfigError: If the mapping fails validation
    """
    try:
        model = CacheControlPolicyModel.model_validate(data or {})
    except ValidationError as e:
        logger.error(f"Invalid cache control policy config: {e}")
        raise CacheControlConfigError(f"Invalid cache control policy config: {e}") from e
    return model.to_config()


def load_policy_config_from_yaml(
    path: Union[str, Path],
    section: Optional[str] = None,
) -> CacheControlPolicyConfig:
    """
    Load a policy configuration from a YAML file.

    Args:
        path: YAML file path
        section: Dotted path to the policy section (e.g. 'http.cache_control').
            Default: the whole document

    Raises:
        CacheControlConfigError: If the file cannot be read or parsed, the
            section is missing, or validation fails
    """
    file_path = Path(path)
    logger.debug(f"Loading cache control policy from: {file_path}")

    try:
        raw = yaml.safe_load(file_path.read_text()) or {}
    except OSError as e:
        logger.error(f"Failed to read cache control policy file {file_path}: {e}")
        raise CacheControlConfigError(f"Failed to read {file_path}: {e}") from e
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing error in {file_path}: {e}")
        raise CacheControlConfigError(f"YAML parsing error in {file_path}: {e}") from e

    data: Any = raw
    if section:
        for key in section.split("."):
            if not isinstance(data, Mapping) or key not in data:
                logger.error(f"Section '{section}' not found in {file_path}")
                raise CacheControlConfigError(f"Section '{section}' not found in {file_path}")
            data = data[key]

    if not isinstance(data, Mapping):
        raise CacheControlConfigError(
            f"Cache control policy in {file_path} must be a mapping, got {type(data).__name__}"
        )

    config = load_policy_config(data)
    logger.info(f"Loaded cache control policy from: {file_path}")
    return config
