"""Fixed-size bit sets backed by a Python integer."""

from __future__ import annotations

from typing import ClassVar, Optional, TypeVar, Union

_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1

B = TypeVar("B", bound="Bitset")


class Bitset:
    """A set of ``num_bits`` bits; bit ``i`` is the ``i``-th least significant."""

    FIXED_SIZE: ClassVar[Optional[int]] = None

    def __init__(self, num_bits: int, value: int = 0) -> None:
        if num_bits <= 0:
            raise ValueError("a bitset needs at least one bit")
        if value < 0:
            raise ValueError("bit value must be non-negative")
        self._num_bits = num_bits
        self._mask = (1 << num_bits) - 1
        self._value = value & self._mask

    @classmethod
    def _make(cls: type[B], num_bits: int, value: int) -> B:
        fixed = cls.FIXED_SIZE
        if fixed is not None and num_bits != fixed:
            raise ValueError(f"{cls.__name__} holds exactly {fixed} bits")
        obj = cls.__new__(cls)
        Bitset.__init__(obj, num_bits, value)
        return obj

    @staticmethod
    def _parse(text: str) -> int:
        value = 0
        for index, char in enumerate(text):
            if char == "1":
                value |= 1 << index
            elif char != "0":
                raise ValueError(f"invalid bit character {char!r}")
        return value

    @classmethod
    def from_string(cls: type[B], text: str, num_bits: Optional[int] = None) -> B:
        """Build a bitset where character ``i`` of ``text`` gives bit ``i``."""
        if num_bits is None:
            num_bits = cls.FIXED_SIZE if cls.FIXED_SIZE is not None else len(text)
        if len(text) > num_bits:
            raise ValueError("bit string is longer than the bitset")
        return cls._make(num_bits, cls._parse(text))

    @classmethod
    def repeat(cls: type[B], word: int, num_bits: Optional[int] = None) -> B:
        """Build a bitset whose every 64-bit word equals ``word``."""
        if num_bits is None:
            if cls.FIXED_SIZE is None:
                raise ValueError("num_bits is required")
            num_bits = cls.FIXED_SIZE
        word &= _WORD_MASK
        words = -(-num_bits // _WORD_BITS)
        value = 0
        for slot in range(words):
            value |= word << (slot * _WORD_BITS)
        return cls._make(num_bits, value)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._num_bits:
            raise IndexError(f"bit index {index} out of range")

    def get(self, index: int) -> bool:
        """Return whether bit ``index`` is set."""
        self._check_index(index)
        return bool(self._value >> index & 1)

    def set(self, index: int) -> None:
        """Set bit ``index``."""
        self._check_index(index)
        self._value |= 1 << index

    def reset(self, index: int) -> None:
        """Clear bit ``index``."""
        self._check_index(index)
        self._value &= ~(1 << index)

    def clear(self) -> None:
        """Clear every bit."""
        self._value = 0

    def flip(self) -> None:
        """Invert every bit."""
        self._value ^= self._mask

    def all(self) -> bool:
        """Return whether every bit is set."""
        return self._value == self._mask

    def any(self) -> bool:
        """Return whether at least one bit is set."""
        return self._value != 0

    def count(self) -> int:
        """Return the number of set bits."""
        return bin(self._value).count("1")

    def to_string(self) -> str:
        """Return the bits as ``'0'``/``'1'`` characters, bit 0 first."""
        return "".join("1" if self._value >> i & 1 else "0" for i in range(self._num_bits))

    @property
    def value(self) -> int:
        """The bits as a non-negative integer."""
        return self._value

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __len__(self) -> int:
        return self._num_bits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitset):
            return NotImplemented
        return self._num_bits == other._num_bits and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def _other_value(self, other: object) -> int:
        if not isinstance(other, Bitset):
            raise TypeError("operand must be a Bitset")
        if other._num_bits != self._num_bits:
            raise ValueError("bitsets differ in size")
        return other._value

    def __and__(self: B, other: Bitset) -> B:
        return self._make(self._num_bits, self._value & self._other_value(other))

    def __or__(self: B, other: Bitset) -> B:
        return self._make(self._num_bits, self._value | self._other_value(other))

    def __xor__(self: B, other: Bitset) -> B:
        return self._make(self._num_bits, self._value ^ self._other_value(other))

    def __iand__(self: B, other: Bitset) -> B:
        self._value &= self._other_value(other)
        return self

    def __ior__(self: B, other: Bitset) -> B:
        self._value |= self._other_value(other)
        return self

    def __ixor__(self: B, other: Bitset) -> B:
        self._value ^= self._other_value(other)
        return self

    def __invert__(self: B) -> B:
        return self._make(self._num_bits, self._value ^ self._mask)


class _FixedBitset(Bitset):
    """Base for bitsets of a size fixed by the class."""

    def __init__(self, value: Union[int, str] = 0) -> None:
        size = self.FIXED_SIZE
        assert size is not None
        if isinstance(value, str):
            if len(value) > size:
                raise ValueError("bit string is longer than the bitset")
            value = self._parse(value)
        super().__init__(size, value)


class Bitset128(_FixedBitset):
    """128 bits."""

    FIXED_SIZE = 128

    def __init__(self, value: Union[int, str] = 0) -> None:
        super().__init__(value)


class Bitset256(_FixedBitset):
    """256 bits."""

    FIXED_SIZE = 256

    def __init__(self, value: Union[int, str] = 0) -> None:
        super().__init__(value)


class Bitset512(_FixedBitset):
    """512 bits."""

    FIXED_SIZE = 512

    def __init__(self, value: Union[int, str] = 0) -> None:
        super().__init__(value)


class Bitset1024(_FixedBitset):
    """1024 bits."""

    FIXED_SIZE = 1024

    def __init__(self, value: Union[int, str] = 0) -> None:
        super().__init__(value)


class Bitset2048(_FixedBitset):
    """2048 bits."""

    FIXED_SIZE = 2048

    def __init__(self, value: Union[int, str] = 0) -> None:
        super().__init__(value)


class Bitset4096(_FixedBitset):
    """4096 bits."""

    FIXED_SIZE = 4096

    def __init__(self, value: Union[int, str] = 0) -> None:
        super().__init__(value)