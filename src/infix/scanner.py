import regex

from .tokens import Token, END
from .util import (UnexpectedCharacter, UnexpectedEndOfInput, MalformedNumber,
                   wrap_user_errors)


class Scanner:
    '''
    Pull-based scanner over a single line.

    The cursor only ever moves forward. Once the line is exhausted every call
    to next_token returns the end token.
    '''
    # Starts on an ASCII digit. Swallows every following digit and point, so
    # 1.2.3 is one (malformed) literal rather than 1.2 and a stray point.
    NUMBER = regex.compile(r'[0-9][0-9.]*')
    # Same letters Unicode calls alphabetic; no digits or underscores.
    NAME = regex.compile(r'\p{Alphabetic}+')
    SPACE = regex.compile(r'\s+')

    def __init__(self, line):
        self.buffer = line
        self.offset = 0

    def __iter__(self):
        '''
        Yield tokens up to, not including, the end token.
        '''
        while True:
            token = self.next_token()
            if token == END:
                return
            yield token

    def next_token(self):
        '''
        Consume and return the next token.
        '''
        self._match(self.SPACE)
        if self.offset >= len(self.buffer):
            return END
        character = self.peek()
        number = self._match(self.NUMBER)
        if number is not None:
            return Token.number(self._number(number))
        name = self._match(self.NAME)
        if name is not None:
            return Token.name(name)
        if character in Token.SYMBOLS:
            return Token(self.read())
        raise UnexpectedCharacter(character)

    def peek(self, offset=0):
        '''
        Return character offset places ahead of the cursor, without
        consuming it.
        '''
        if self.offset + offset >= len(self.buffer):
            raise UnexpectedEndOfInput()
        return self.buffer[self.offset + offset]

    def read(self):
        character = self.peek()
        self.offset += 1
        return character

    def _match(self, pattern):
        '''
        Consume and return text matching pattern at the cursor, if any.
        '''
        match = pattern.match(self.buffer, self.offset)
        if match is None:
            return None
        self.offset = match.end()
        return match.group(0)

    @wrap_user_errors(MalformedNumber)
    def _number(self, text):
        return float(text)
