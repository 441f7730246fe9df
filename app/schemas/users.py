from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from authguard.models.user import UserProfile


class ProfileResponse(BaseModel):
    message: str
    user: UserProfile


class AdminDetails(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str
    email: str | None = None
    roles: list[str] = Field(default_factory=list)


class AdminDashboardResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    admin_details: AdminDetails
