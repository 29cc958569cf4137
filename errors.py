"""Input errors.

Anything derived from InputError makes the runner skip one instrument
and carry on with the rest. PriceFileError sits outside that hierarchy:
it aborts the whole run because no instrument can be read.
"""


class InputError(ValueError):
    pass


class PriceFileError(ValueError):
    pass


class UnknownInstrument(InputError):
    pass


class EmptySeries(InputError):
    pass


class DateWindowNotFound(InputError):
    pass


class InvalidWindowBound(InputError):
    pass
