"""256-bit unsigned integers carried as two 128-bit field elements."""

from pydantic import BaseModel, field_validator

from tokensync.exceptions import DecodeError

UINT128_LIMIT = 2**128


class Uint256(BaseModel):
    """Cairo `u256`: `value = low + high * 2**128`. Compared by composed value."""

    model_config = {"frozen": True}

    low: int = 0
    high: int = 0

    @field_validator("low", "high")
    @classmethod
    def limb_fits_128_bits(cls, v: int) -> int:
        if not 0 <= v < UINT128_LIMIT:
            raise ValueError("u256 limb must be in [0, 2**128)")
        return v

    @property
    def value(self) -> int:
        return self.low + (self.high << 128)

    @classmethod
    def from_int(cls, value: int) -> "Uint256":
        if value < 0 or value >= UINT128_LIMIT**2:
            raise ValueError(f"{value} does not fit in 256 bits")
        return cls(low=value % UINT128_LIMIT, high=value >> 128)

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        v = _comparable(other)
        return NotImplemented if v is None else self.value == v

    def __lt__(self, other: object) -> bool:
        v = _comparable(other)
        return NotImplemented if v is None else self.value < v

    def __le__(self, other: object) -> bool:
        v = _comparable(other)
        return NotImplemented if v is None else self.value <= v

    def __gt__(self, other: object) -> bool:
        v = _comparable(other)
        return NotImplemented if v is None else self.value > v

    def __ge__(self, other: object) -> bool:
        v = _comparable(other)
        return NotImplemented if v is None else self.value >= v

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Uint256({self.value})"


def _comparable(other: object) -> int | None:
    if isinstance(other, Uint256):
        return other.value
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None


def assemble_uint256(low: int, high: int) -> Uint256:
    """Combine two data words into a Uint256, rejecting limbs wider than 128 bits."""
    if not 0 <= low < UINT128_LIMIT or not 0 <= high < UINT128_LIMIT:
        raise DecodeError(f"u256 limb out of range (low={hex(low)}, high={hex(high)})")
    return Uint256(low=low, high=high)
