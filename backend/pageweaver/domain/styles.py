from enum import Enum


class FontFamily(str, Enum):
    SANS = "font-sans"
    SERIF = "font-serif"
    MONO = "font-mono"
    PLAYFAIR = "font-playfair"
    POPPINS = "font-poppins"
    ROBOTO = "font-roboto"


class FontSize(str, Enum):
    XS = "text-xs"
    SM = "text-sm"
    BASE = "text-base"
    LG = "text-lg"
    XL = "text-xl"
    XL2 = "text-2xl"
    XL3 = "text-3xl"
    XL4 = "text-4xl"
    XL5 = "text-5xl"
    XL6 = "text-6xl"


class LineHeight(str, Enum):
    NONE = "leading-none"
    TIGHT = "leading-tight"
    SNUG = "leading-snug"
    NORMAL = "leading-normal"
    RELAXED = "leading-relaxed"
    LOOSE = "leading-loose"


class LetterSpacing(str, Enum):
    TIGHTER = "tracking-tighter"
    TIGHT = "tracking-tight"
    NORMAL = "tracking-normal"
    WIDE = "tracking-wide"
    WIDER = "tracking-wider"
    WIDEST = "tracking-widest"


class TextAlign(str, Enum):
    LEFT = "text-left"
    CENTER = "text-center"
    RIGHT = "text-right"
    JUSTIFY = "text-justify"


class TextColor(str, Enum):
    BLACK = "text-black"
    WHITE = "text-white"
    BLUE = "text-editor-blue"
    PURPLE = "text-editor-purple"
    TEAL = "text-editor-teal"
    GRAY = "text-gray-700"
    RED = "text-red-500"
    YELLOW = "text-yellow-500"
    GREEN = "text-green-500"
    INDIGO = "text-editor-indigo"


# Style attribute name -> enum accepted for it
STYLE_ATTRIBUTES = {
    "font_family": FontFamily,
    "font_size": FontSize,
    "line_height": LineHeight,
    "letter_spacing": LetterSpacing,
    "text_align": TextAlign,
    "text_color": TextColor,
}

FONT_FLAGS = ("bold", "italic", "underline")


def coerce_style_value(attribute: str, value):
    """
    Resolve a raw style value (enum member, enum value or enum name)
    into the enum member registered for ``attribute``.

    Raises ValueError for unknown attributes or values.
    """
    enum_cls = STYLE_ATTRIBUTES.get(attribute)
    if enum_cls is None:
        raise ValueError(f"Unknown style attribute: {attribute}")

    if value is None or isinstance(value, enum_cls):
        return value

    try:
        return enum_cls(value)
    except ValueError:
        pass

    try:
        return enum_cls[str(value).upper()]
    except KeyError:
        raise ValueError(f"Invalid value for {attribute}: {value!r}") from None
