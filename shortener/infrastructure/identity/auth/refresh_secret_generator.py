import secrets

from shortener.domain.identity.value_objects.plain_refresh_secret import PlainRefreshSecret


class RandomRefreshSecretGenerator:
    def generate(self, length: int) -> PlainRefreshSecret:
        return PlainRefreshSecret(secrets.token_bytes(length))
