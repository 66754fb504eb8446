from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

CakeType = Literal["egg", "eggless"]
CakeWeight = Literal["halfKg", "oneKg"]


@dataclass(frozen=True)
class AddOn:
    id: str
    name: str
    price: int
    image: str


@dataclass(frozen=True)
class EventType:
    id: str
    name: str
    icon: str


@dataclass(frozen=True)
class CakePrices:
    egg_half_kg: int
    egg_one_kg: int
    eggless_half_kg: int
    eggless_one_kg: int

    def price_for(self, cake_type: CakeType, weight: CakeWeight) -> int:
        if cake_type == "egg":
            return self.egg_half_kg if weight == "halfKg" else self.egg_one_kg
        return self.eggless_half_kg if weight == "halfKg" else self.eggless_one_kg


@dataclass(frozen=True)
class Cake:
    id: str
    name: str
    image: str
    prices: CakePrices
