"""Client identity: target URL, database and optional credentials."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(slots=True, frozen=True)
class Credentials:
    username: str
    password: str = field(repr=False)


@dataclass(slots=True, frozen=True)
class ConnectionTarget:
    url: str
    database: str
    credentials: Credentials | None = None

    def basic_parameters(self) -> list[tuple[str, str]]:
        """Parameters sent with every query/write request.

        Derived on each call so credentials attached later are always
        reflected.
        """

        params = [("db", self.database)]
        if self.credentials is not None:
            params.append(("u", self.credentials.username))
            params.append(("p", self.credentials.password))
        return params

    def with_credentials(self, username: str, password: str) -> "ConnectionTarget":
        return replace(
            self,
            credentials=Credentials(username=str(username), password=str(password)),
        )


__all__ = [
    "Credentials",
    "ConnectionTarget",
]
