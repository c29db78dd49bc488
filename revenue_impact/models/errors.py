from __future__ import annotations


class InvalidArgumentError(ValueError):
    """An input to a calculator is outside its allowed range."""

    def __init__(self, parameter: str, value: object, rule: str):
        self.parameter = parameter
        self.value = value
        self.rule = rule
        super().__init__(f"{parameter} {rule}, got {value}")
