import logging

import pytest


# ============================================================================

def test_newton_console(capsys):
    from rootsolve.cli import main

    status = main(['cli', '-f', 'x^2 - 4', 'newton', '--initial', '1',
                   '--derivative', '2x'])
    out = capsys.readouterr().out

    assert status == 0
    assert out.startswith("The found root is 2")
    assert "x(0) = 1 --- f(x) = -3" in out
    assert "x(1) = 2.5 --- f(x) = 2.25" in out


def test_secant(capsys):
    from rootsolve.cli import main

    assert main(['cli', '-f', 'x^2 - 2', '-t', '1e-10', 'secant', '--x0',
                 '1', '--x1', '2']) == 0
    assert "The found root is 1.41421356" in capsys.readouterr().out


def test_iterative_aitken(capsys):
    from rootsolve.cli import main

    assert main(['cli', '-f', 'x^2 - 3x + 2', '-a', 'iterative',
                 '--initial', '0.5', '--g-function',
                 '0.25x^2 + 0.25x + 0.5']) == 0
    out = capsys.readouterr().out
    root = float(out.splitlines()[0].split()[-1])
    assert root == pytest.approx(1.0, abs=1e-6)


def test_write_to_csv(tmp_path, monkeypatch, capsys):
    from rootsolve.cli import main

    monkeypatch.chdir(tmp_path)
    assert main(['--write-to-csv', 'out', 'cli', '-f', 'x^2 - 1',
                 'bisection', '--interval-a', '0', '--interval-b', '2']) == 0
    assert (tmp_path / 'out.csv').read_text() == "2,3\n1,0\n"
    assert capsys.readouterr().out == ""


def test_append(tmp_path, monkeypatch):
    from rootsolve.cli import main

    monkeypatch.chdir(tmp_path)
    args = ['--write-to-dat', 'out', '--append', 'cli', '-f', 'x^2 - 1',
            'bisection', '--interval-a', '0', '--interval-b', '2']
    assert main(args) == 0
    assert main(args) == 0
    assert (tmp_path / 'out.dat').read_text() == "2 3\n1 0\n\n2 3\n1 0\n"


def test_config_files(tmp_path, capsys):
    from rootsolve.cli import main

    dat = tmp_path / 'problem.dat'
    dat.write_text("method = bisection\nfunction = x^2 - 1\n"
                   "initial_point = 0\nfinal_point = 2\n")
    assert main(['dat', '--file', str(dat)]) == 0
    assert capsys.readouterr().out.startswith("The found root is 1")

    csv = tmp_path / 'problem.csv'
    csv.write_text("newton;1e-9;20;n;x^2 - 4;2x;;;;3\n")
    assert main(['csv', '--file', str(csv), '--sep', ';',
                 '--no-header']) == 0
    assert capsys.readouterr().out.startswith("The found root is 2")


def test_verbose(monkeypatch, capsys):
    from rootsolve.cli import main

    configured = []
    monkeypatch.setattr(logging, 'basicConfig',
                        lambda **kwargs: configured.append(kwargs))

    assert main(['-v', 'cli', '-f', 'x^2 - 1', 'bisection', '--interval-a',
                 '0', '--interval-b', '2']) == 0
    out = capsys.readouterr().out

    assert configured
    assert "Bisection:\n" in out
    assert "... Iteration 0: x = +2, f(x) = +3" in out
    assert "... Converged." in out


# ----------------------------------------------------------------------------

@pytest.mark.parametrize("args, message", [
    # Does not converge.
    (['cli', '-f', 'x - 2x - 3', '-n', '10', 'iterative', '--initial', '0',
      '--g-function', '2x + 3'], "failed to converge"),
    # Zero derivative.
    (['cli', '-f', 'x^3 - 3', 'newton', '--initial', '0', '--derivative',
      '3x^2'], "Derivative was zero"),
])
def test_solver_failure(args, message, capsys):
    from rootsolve.cli import main

    assert main(args) == 1
    assert message in capsys.readouterr().err


@pytest.mark.parametrize("args, message", [
    # Bad expression.
    (['cli', '-f', 'x^2 + 3y', 'bisection', '--interval-a', '0',
      '--interval-b', '2'], "Unsupported token"),
    # No change of sign.
    (['cli', '-f', 'x^2 + 1', 'bisection', '--interval-a', '0',
      '--interval-b', '2'], "different signs"),
    # Missing option.
    (['cli', '-f', 'x^2 - 1', 'bisection', '--interval-a', '0'],
     "--interval-b"),
    # Missing file.
    (['dat', '--file', 'no_such_file.dat'], "no_such_file.dat"),
])
def test_bad_input(args, message, capsys):
    from rootsolve.cli import main

    assert main(args) == 2
    assert message in capsys.readouterr().err


def test_version(capsys):
    from rootsolve import __version__
    from rootsolve.cli import main

    assert main(['--version']) == 0
    assert __version__ in capsys.readouterr().out
