import io

from circular_gallery.logging import Logger


def test_lines_carry_frame_number():
    out = io.StringIO()
    logger = Logger(out)
    logger("[INIT] hello")
    logger.increment_frame()
    logger.log("[LOOP] tick")
    first, second = out.getvalue().splitlines()
    assert "F000000] [INIT] hello" in first
    assert "F000001] [LOOP] tick" in second


def test_disabled_logger_writes_nothing():
    out = io.StringIO()
    logger = Logger(out)
    logger.enabled = False
    logger("quiet")
    assert out.getvalue() == ""


def test_closed_stream_falls_back_to_stderr(capsys):
    out = io.StringIO()
    out.close()
    Logger(out).log("[APP] still visible")
    assert "[APP] still visible" in capsys.readouterr().err
