from pydantic import BaseModel, ConfigDict, Field, SecretStr
from starlette.types import ASGIApp

from basicgate.basicgate import BasicAuth
from basicgate.security.authentication.auth import Authenticator


class BasicAuthConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    realm: str = ""
    charset: str | None = None
    users: dict[str, SecretStr] = Field(default_factory=dict)

    def to_basic_auth(
        self,
        authenticator: Authenticator | None = None,
        invalid_credentials_response: ASGIApp | None = None,
        invalid_scheme_response: ASGIApp | None = None,
    ) -> BasicAuth:
        """Build the gate, the callables being the parts a file cannot carry."""
        return BasicAuth.custom(
            authenticator=authenticator,
            charset=self.charset,
            invalid_credentials_response=invalid_credentials_response,
            invalid_scheme_response=invalid_scheme_response,
            realm=self.realm,
            users={
                username: password.get_secret_value()
                for username, password in self.users.items()
            },
        )
