from enum import Enum


class ColorErrorKind(str, Enum):
    UNDETECTED = "undetected"
    COMPONENT_COUNT = "component_count"
    MALFORMED = "malformed"
    UNSUPPORTED = "unsupported"


class ColorError(ValueError):
    """Base class for recoverable conversion failures."""

    kind = ColorErrorKind.MALFORMED


class UndetectableFormatError(ColorError):
    """Auto-detection found no format and the value is not a hex token either."""

    kind = ColorErrorKind.UNDETECTED


class ComponentCountError(ColorError):
    """The value does not carry the number of components its format needs."""

    kind = ColorErrorKind.COMPONENT_COUNT


class MalformedColorError(ColorError):
    """The colorspace parser rejected the value."""

    kind = ColorErrorKind.MALFORMED


class UnsupportedConversionError(ColorError):
    """No transform is wired up for the requested pair of formats."""

    kind = ColorErrorKind.UNSUPPORTED
