from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from envstore.core.masking import DEFAULT_SECRET_MARKERS, MASK

"""
Here, we collect the loader and demo settings
"""

DEFAULT_EXPECTED_KEYS: tuple[str, ...] = (
    "IMAP_HOST",
    "IMAP_PORT",
    "IMAP_USERNAME",
    "IMAP_PASSWORD",
)


class LoaderConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # --- File resolution ---
    filename: str = Field(default=".env", description="File looked up in the working directory")
    cwd_env_var: str = Field(
        default="PWD", description="Process environment entry holding the working directory"
    )
    encoding: str = Field(default="utf-8", description="Text encoding of the .env file")

    # --- Parsing ---
    extended_types: bool = Field(
        default=False, description="Also infer booleans and floats (integers always)"
    )

    # --- Display ---
    expected_keys: tuple[str, ...] = Field(
        default=DEFAULT_EXPECTED_KEYS, description="Keys the demo prints"
    )
    secret_markers: tuple[str, ...] = Field(
        default=DEFAULT_SECRET_MARKERS, description="Substrings marking a key as secret"
    )
    mask: str = Field(default=MASK, description="Replacement text for secret values")

    @field_validator("filename")
    @classmethod
    def _filename_is_a_name(cls, value: str) -> str:
        if not value or value.strip() != value or "/" in value or "\\" in value:
            raise ValueError("filename must be a bare, non-empty file name")
        return value

    @field_validator("expected_keys")
    @classmethod
    def _keys_non_empty(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not key for key in value):
            raise ValueError("expected_keys must not contain blank entries")
        return value
