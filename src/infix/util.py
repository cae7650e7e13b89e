from functools import wraps


class CalcError(Exception):
    '''
    Any error reported to the user for a single line.

    args[0] is always the one-line message.
    '''
    pass


class LexError(CalcError):
    pass


class UnexpectedCharacter(LexError):
    def __init__(self, character):
        super().__init__("Unexpected character '{}'".format(character))
        self.character = character


class UnexpectedEndOfInput(LexError):
    def __init__(self):
        super().__init__('Unexpected end of input')


class MalformedNumber(LexError):
    def __init__(self, text):
        super().__init__("Malformed number '{}'".format(text))
        self.text = text


class ParseError(CalcError):
    pass


class UnknownFunction(ParseError):
    def __init__(self, name):
        super().__init__("No such function defined: '{}'".format(name))
        self.name = name


class UnexpectedToken(ParseError):
    def __init__(self, token):
        super().__init__("Unexpected token '{}'".format(token))
        self.token = token


class ExpectedToken(ParseError):
    def __init__(self, expected, found):
        super().__init__("Expected '{}' but found '{}'".format(expected,
                                                               found))
        self.expected = expected
        self.found = found


class NestingTooDeep(ParseError):
    def __init__(self):
        super().__init__('Expression nested too deeply')


def wrap_user_errors(error):
    '''
    Decorator that converts stray exceptions into the given CalcError.

    The error is built from the wrapped method's arguments, minus self.
    Passes through CalcErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                raise error(*args[1:], **kwargs) from e
        return wrapper
    return decorator
