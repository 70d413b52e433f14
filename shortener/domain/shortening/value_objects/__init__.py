from .valid_url import ValidUrl

__all__ = ["ValidUrl"]
