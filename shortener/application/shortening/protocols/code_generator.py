from typing import Protocol


class CodeGeneratorProtocol(Protocol):
    def generate(self) -> str: ...
