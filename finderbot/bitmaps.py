"""Monochrome glyph bitmaps for the built-in on-screen keyboard font."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageFormat:
    """A 1-bit image stored row by row, most significant bit leftmost."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("bitmap dimensions must be positive")
        if len(self.data) < self.bytes_per_row * self.height:
            raise ValueError("bitmap data is shorter than its dimensions require")

    @property
    def bytes_per_row(self) -> int:
        return (self.width + 7) // 8

    @property
    def length(self) -> int:
        return len(self.data)

    def row_bits(self, row: int) -> int:
        """Return the bits of ``row`` as one integer, leftmost pixel highest."""
        if not 0 <= row < self.height:
            raise IndexError(f"row {row} outside bitmap of height {self.height}")
        start = row * self.bytes_per_row
        return int.from_bytes(self.data[start:start + self.bytes_per_row], "big")

    def is_set(self, x: int, y: int) -> bool:
        """Whether the pixel at column ``x`` of row ``y`` is set."""
        if not 0 <= x < self.width:
            raise IndexError(f"column {x} outside bitmap of width {self.width}")
        shift = self.bytes_per_row * 8 - 1 - x
        return bool((self.row_bits(y) >> shift) & 1)


def _glyph(hex_data: str) -> ImageFormat:
    return ImageFormat(16, 16, bytes.fromhex(hex_data))


KEYBOARD: tuple[ImageFormat, ...] = tuple(_glyph(h) for h in (
    # a
    "ffff8001808181c1814183418261822186318" "7f18c118819980980018001ffff",
    # b
    "ffff80018f01898188c1884189818f8188418861882188618fc180018001ffff",
    # c
    "ffff8001800181c18301840188018801880188018c01860183f180018001ffff",
    # d
    "ffff800180018f8188c18861882188218821882188618" "9c18f0180018001ffff",
    # e
    "ffff80018fe18801880188018801" "8fc1880188018801880188018fe18001ffff",
    # f
    "ffff80018ff18801880188018f81880188018801880188018801880180" "01ffff",
    # g
    "ffff800180e183a186018c018801980190019" "0f998398c3987e980018001ffff",
    # h
    "ffff8001882188218821882188618fe188218821882188218821882180" "01ffff",
    # i
    "ffff80018ff1810181018101810181018101810181018101" "8ff180018001ffff",
    # j
    "ffff800180018ff9808180c180418041804188418841" "88c18f8180018001ffff",
    # k
    "ffff800184318421844184c18581850187018701" "85c18461843184118001ffff",
    # l
    "ffff8001840184018401840184018401840184018401840184" "0187f18001ffff",
    # m
    "ffff80018001800182218671" "86d18e918b918911980990099009900180" "01ffff",
    # n
    "ffff8001800186098609861" "98e11891189118" "9b198a190a190e190018001ffff",
    # o
    "ffff8001800181c1833186118419880988098819" "8c11867183c180018001ffff",
    # p
    "ffff80018f01898188818" "8c188418cc18f01880188018801880180018001ffff",
    # q
    "ffff800181c187b18c1188119811901190d1987188318c3987ed80018001ffff",
    # r
    "ffff80018f8188c1884188618bc18f018901888188c188618821" "80018001ffff",
    # s
    "ffff800180f183918601" "8c0188018c0187c1802180219031" "9fe180018001ffff",
    # t
    "ffff8001801980f19f81818180818081808180818081808181818001" "8001ffff",
    # u
    "ffff800180018419840984098409840984098411861183" "3181e180018001ffff",
    # v
    "ffff8001800198218861884188418" "4c18481868182818301810180018001ffff",
    # w
    "ffff80018001900990198811899189918991" "8da187a186e1840180018001ffff",
    # x
    "ffff80019009981" "98c3186218241" "83c1818183818" "6c18c618831981180" "01ffff",
    # y
    "ffff8001841186318221822183618141" "81c18081808180818041804180" "01ffff",
    # z
    "ffff80018001800" "18ff98019803180e18381860" "18c018c3987e180018001ffff",
))


def glyph_for(char: str) -> ImageFormat:
    """Return the keyboard glyph for a lower-case letter ``a``-``z``.

    Raises KeyError for any character the font does not contain.
    """
    if len(char) != 1:
        raise ValueError("glyph_for expects a single character")
    index = ord(char) - ord("a")
    if not 0 <= index < len(KEYBOARD):
        raise KeyError(f"character {char!r} not found in font")
    return KEYBOARD[index]