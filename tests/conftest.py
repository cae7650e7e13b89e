from io import StringIO

from pytest import fixture

from infix import cli as cli_module
from infix.cli import CLI


class PipedInput(StringIO):
    '''
    Non-interactive stdin stand-in.
    '''
    def fileno(self):
        return 0


@fixture
def run(capsys):
    '''
    Run the CLI with the given arguments, returning captured out and err.
    '''
    def run(*args):
        CLI().run(args=list(args))
        return capsys.readouterr()
    return run


@fixture
def piped(monkeypatch):
    '''
    Replace stdin with text, as if piped in from a file.
    '''
    def piped(text):
        monkeypatch.setattr('sys.stdin', PipedInput(text))
        monkeypatch.setattr(cli_module, 'isatty', lambda fd: False)
    return piped
