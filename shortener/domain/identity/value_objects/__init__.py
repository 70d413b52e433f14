from .digest import Digest
from .email import Email
from .password import Password
from .plain_refresh_secret import PlainRefreshSecret

__all__ = ["Digest", "Email", "Password", "PlainRefreshSecret"]
