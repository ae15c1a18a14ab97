from io import StringIO
import sys

from pytest import fixture

from infixrpn.cli import CLI


@fixture
def run_cli(monkeypatch, capsys):
    '''
    Run a CLI for a notation and return its captured (out, err).

    Lines in ``stdin``, if given, are piped in. They are not a tty.
    '''
    def run(notation, *args, stdin=None):
        if stdin is not None:
            monkeypatch.setattr(sys, 'stdin', StringIO(stdin))
        cli = CLI(notation=notation)
        cli.run(args=list(args))
        return capsys.readouterr()
    return run
