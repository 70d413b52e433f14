from typing import Protocol

from shortener.domain.identity.value_objects.plain_refresh_secret import PlainRefreshSecret


class RefreshSecretGeneratorProtocol(Protocol):
    def generate(self, length: int) -> PlainRefreshSecret: ...
