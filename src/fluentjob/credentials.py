"""Credential values and their builders."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict

from .errors import InvalidCredentialError

logger = logging.getLogger(__name__)


class ConfigurationEntry(BaseModel):
    """A single key/value pair handed to a credential provider."""

    model_config = ConfigDict(frozen=True)

    key: str
    value: str


class Credential(BaseModel):
    """A named, typed credential descriptor."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str  # "hbase" | "hcatalog" | "hive2" | ...
    configuration_entries: tuple[ConfigurationEntry, ...] = ()

    @property
    def configuration(self) -> dict[str, str]:
        return {entry.key: entry.value for entry in self.configuration_entries}


class CredentialBuilder:
    """Mutable staging area for a single :class:`Credential`."""

    def __init__(self) -> None:
        self._name: str = ""
        self._type: str = ""
        # dicts keep insertion order and overwrite in place
        self._entries: dict[str, str] = {}

    @classmethod
    def create(cls) -> CredentialBuilder:
        return cls()

    @classmethod
    def create_from_existing(cls, credential: Credential) -> CredentialBuilder:
        builder = cls()
        builder._name = credential.name
        builder._type = credential.type
        builder._entries = dict(credential.configuration)
        return builder

    def with_name(self, name: str) -> CredentialBuilder:
        self._name = name
        return self

    def with_type(self, type: str) -> CredentialBuilder:
        self._type = type
        return self

    def with_configuration_entry(self, key: str, value: str) -> CredentialBuilder:
        self._entries[key] = value
        return self

    def build(self) -> Credential:
        if not self._name:
            raise InvalidCredentialError("Credential name must not be empty", subject="name")
        if not self._type:
            raise InvalidCredentialError(
                f"Credential '{self._name}' must have a non-empty type", subject="type"
            )

        credential = Credential(
            name=self._name,
            type=self._type,
            configuration_entries=tuple(
                ConfigurationEntry(key=key, value=value) for key, value in self._entries.items()
            ),
        )
        logger.debug("Built credential %s (%s)", credential.name, credential.type)
        return credential


class Credentials(BaseModel):
    """An ordered collection of credentials declared on a workflow."""

    model_config = ConfigDict(frozen=True)

    credentials: tuple[Credential, ...] = ()

    def __iter__(self) -> Iterator[Credential]:  # type: ignore[override]
        return iter(self.credentials)

    def __len__(self) -> int:
        return len(self.credentials)

    def names(self) -> list[str]:
        return [credential.name for credential in self.credentials]

    def get(self, name: str) -> Optional[Credential]:
        """Return the first credential called ``name``, if any."""
        return next((c for c in self.credentials if c.name == name), None)


class CredentialsBuilder:
    """Collects credentials for an explicit workflow-level declaration.

    Nothing is validated here: conflicting names are reported when the
    workflow itself is built.
    """

    def __init__(self) -> None:
        self._credentials: list[Credential] = []

    @classmethod
    def create(cls) -> CredentialsBuilder:
        return cls()

    @classmethod
    def create_from_existing(cls, credentials: Credentials) -> CredentialsBuilder:
        builder = cls()
        builder._credentials = list(credentials.credentials)
        return builder

    def with_credential(self, credential: Credential) -> CredentialsBuilder:
        self._credentials.append(credential)
        return self

    def with_new_credential(
        self,
        name: str,
        type: str,
        configuration_entries: tuple[tuple[str, str], ...] | list[tuple[str, str]] = (),
    ) -> CredentialsBuilder:
        """Build a credential in place and append it."""
        builder = CredentialBuilder.create().with_name(name).with_type(type)
        for key, value in configuration_entries:
            builder.with_configuration_entry(key, value)
        return self.with_credential(builder.build())

    def without_credential(self, name: str) -> CredentialsBuilder:
        self._credentials = [c for c in self._credentials if c.name != name]
        return self

    def clear(self) -> CredentialsBuilder:
        self._credentials.clear()
        return self

    def build(self) -> Credentials:
        return Credentials(credentials=tuple(self._credentials))
