from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class UserProfile(BaseModel):
    """
    User record as handed over by the external user store.
    Read-only here; serialized with camelCase keys.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    email: EmailStr | None = None
    display_name: str | None = None
    provider: str | None = None
    roles: list[str] = Field(default_factory=list)
    is_two_factor_enabled: bool = False

    def has_any_role(self, roles) -> bool:
        return any(role in self.roles for role in roles)


class TokenPair(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    access_token: str
    refresh_token: str


class TwoFactorSetup(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    otp_auth_url: str
    base32_secret: str
