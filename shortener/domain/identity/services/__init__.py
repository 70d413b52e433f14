from .token_digester import TokenDigester

__all__ = ["TokenDigester"]
