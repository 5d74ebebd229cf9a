class PackFormatException(Exception):
    '''Base class for the errors raised while decoding a template.

    It carries a message and the location of the span that caused it, the same
    shape a source parser uses for its diagnostics.
    '''

    def __init__(self, message, location):
        self.message = message
        self.location = location
        super().__init__(message, location)

    def __str__(self):
        return f'{self.message} ({self.location.start}..{self.location.end})'


class UnknownDirectiveException(PackFormatException):
    pass


class UnsupportedDirectiveException(PackFormatException):
    pass


class LengthTooBigException(PackFormatException):
    pass


class BangNotAllowedException(PackFormatException):
    pass


class DoubleEndianException(PackFormatException):
    pass


class StreamException(Exception):
    '''The template could not be acquired from its source.'''

    def __init__(self, path):
        self.path = path
        super().__init__(path)

    def __str__(self):
        return f"unable to read template at '{self.path}'"
