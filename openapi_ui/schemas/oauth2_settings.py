"""OAuth2 client settings for Swagger UI's authorize dialog."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OAuth2ClientSettings(BaseModel):
    """Arguments of Swagger UI's ``initOAuth`` call."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    client_id: str | None = None
    client_secret: str | None = None
    realm: str | None = None
    app_name: str | None = None
    scope_separator: str = " "
    scopes: list[str] = Field(default_factory=list)
    use_pkce_with_authorization_code_grant: bool = False
    additional_query_string_parameters: dict[str, str] = Field(
        default_factory=dict,
        alias="additionalQueryStringParams",
    )

    def to_init_oauth(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
