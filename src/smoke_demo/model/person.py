"""Person — a name and an age that can introduce themselves."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Person:
    name: str
    age: int

    def greet(self) -> str:
        return f"我叫{self.name}，今年{self.age}岁"
