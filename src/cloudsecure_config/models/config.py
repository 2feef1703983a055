"""Configuration models."""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import ProfileNotFoundError


SECRET_MASK = "********"


class CredentialProfile(BaseModel):
    """API credentials and tenant ID for one CloudSecure account."""

    model_config = ConfigDict(populate_by_name=True)

    api_key: str = Field(default="", alias="apiKey", description="API key")
    api_secret: str = Field(default="", alias="apiSecret", description="API secret")
    tenant_id: str = Field(default="", alias="tenantID", description="Tenant ID")

    @field_validator("api_key", "api_secret", "tenant_id", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        """Read JSON null as an empty string."""
        return "" if v is None else v


class CloudSecureConfig(BaseModel):
    """Named CloudSecure profiles plus the default profile name."""

    model_config = ConfigDict(populate_by_name=True)

    profiles: Dict[str, CredentialProfile] = Field(
        default_factory=dict,
        alias="cloudsecures",
        description="Profiles keyed by name",
    )
    default_profile_name: str = Field(
        default="",
        alias="default_cloud_name",
        description="Profile used when no name is given",
    )

    @field_validator("profiles", mode="before")
    @classmethod
    def none_as_empty_mapping(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("default_profile_name", mode="before")
    @classmethod
    def none_as_empty_name(cls, v: Any) -> Any:
        return "" if v is None else v

    def is_complete(self) -> bool:
        """Check that at least one profile exists and a default is set."""
        return bool(self.profiles) and self.default_profile_name != ""

    def get_profile(self, name: Optional[str] = None) -> CredentialProfile:
        """Get a profile by name, or the default profile if no name is given.

        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        if name is None:
            name = self.default_profile_name
        try:
            return self.profiles[name]
        except KeyError:
            raise ProfileNotFoundError(name) from None

    def to_dict(self) -> Dict[str, Any]:
        """Get configuration as a dictionary using the on-disk key names."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """Render the configuration as the on-disk JSON text."""
        return json.dumps(
            self.to_dict(),
            indent=2,
            sort_keys=True,
            ensure_ascii=False,
        )

    def masked(self) -> "CloudSecureConfig":
        """Get a copy with every API secret masked, for display."""
        profiles = {
            name: profile.model_copy(
                update={"api_secret": SECRET_MASK if profile.api_secret else ""}
            )
            for name, profile in self.profiles.items()
        }
        return self.model_copy(update={"profiles": profiles})
