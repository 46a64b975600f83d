"""Library exceptions."""


class XExtensionItemException(Exception):
    """Base exception for the xextensionitem package."""


class ParameterAssertionError(XExtensionItemException, AssertionError):
    """A required argument was missing or unusable.

    Raised for caller-contract violations that are discoverable at development
    time: a source without a placeholder, an override registered without an
    activity type or provider, or decoding a missing payload.
    """

    def __init__(self, parameter: str, reason: str = "is required") -> None:
        self.parameter = parameter
        super().__init__(f"Invalid parameter not satisfying: {parameter} {reason}")


def parameter_assert(condition: object, parameter: str, reason: str = "is required") -> None:
    if not condition:
        raise ParameterAssertionError(parameter, reason)


__all__ = ["XExtensionItemException", "ParameterAssertionError", "parameter_assert"]
