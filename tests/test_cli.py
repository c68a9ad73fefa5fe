import logging

import pytest

from toyproof.cli import generate_parser, main, set_logger_config


def test_no_arguments_prints_reference_line(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "The probability of a successful proof is 1.00.\n"


def test_failing_secret(capsys):
    assert main(["--secret", "1", "--seed", "3"]) == 0
    assert capsys.readouterr().out == "The probability of a successful proof is 0.00.\n"


def test_schnorr_protocol(capsys):
    assert main(["-p", "schnorr", "-n", "3", "-s", "9"]) == 0
    assert capsys.readouterr().out == "The probability of a successful proof is 1.00.\n"


def test_double_verbose_logs_trials_to_stderr(capsys):
    assert main(["-vv", "-n", "2"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "The probability of a successful proof is 1.00.\n"
    assert "DEBUG" in captured.err
    assert "trial 1/2" in captured.err
    assert "trial 2/2" in captured.err
    assert "2/2 trials accepted" in captured.err


def test_single_verbose_logs_summary_only(capsys):
    assert main(["-v", "-n", "2"]) == 0
    err = capsys.readouterr().err
    assert "2/2 trials accepted" in err
    assert "trial 1/2" not in err


def test_long_verbose_flag_repeats_and_clamps(capsys):
    assert main(["--verbose", "-vvv", "-n", "1"]) == 0
    assert logging.getLogger("toyproof").level == logging.DEBUG
    assert "trial 1/1" in capsys.readouterr().err


def test_quiet_by_default(capsys):
    main([])
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize(
    "argv",
    [
        ["-n", "0"],
        ["--secret", "-5"],
        ["--secret", str(1 << 64)],
        ["-p", "schnorr", "--secret", "0"],
        ["-p", "rsa"],
        ["-n", "2.5"],
    ],
)
def test_invalid_arguments_exit_2(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
    assert capsys.readouterr().out == ""


def test_parser_defaults():
    args = generate_parser().parse_args([])
    assert args.iterations == 10
    assert args.secret == 59
    assert args.seed is None
    assert args.protocol == "u64"
    assert args.verbosity == 0


def test_logger_config_is_idempotent():
    set_logger_config(1)
    set_logger_config(2)
    logger = logging.getLogger("toyproof")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
