'''
Inference of the text encoding of the string produced by a template.

Some directives force the encoding of the whole result: the last one found
in the template wins, and a conflict is never an error.
'''
from .enum import Encoding, Type


FORCED_ENCODINGS = {
    Type.UTF8: Encoding.UTF_8,
    Type.BER:  Encoding.ASCII_8BIT,
}


def thread_encoding(current: Encoding, directive_type: Type) -> Encoding:
    return FORCED_ENCODINGS.get(directive_type, current)
