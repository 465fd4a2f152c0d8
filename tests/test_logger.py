import json

from logger.logger import JSONLogger, console_message


def test_log_files_are_dated_jsonl(tmp_path):
    json_logger = JSONLogger(output_directory=str(tmp_path / "logs"), log_file_prefix="bb_")
    json_logger.log({"event": "start"})
    json_logger.log_summary([{"event": "summary"}])
    json_logger.log_halting([{"machine_id": "TM_000001"}, {"machine_id": "TM_000002"}])
    json_logger.log_abandoned([])

    main_log = tmp_path / "logs" / f"bb_{json_logger.today}.jsonl"
    lines = [json.loads(line) for line in main_log.read_text().splitlines()]
    assert lines == [{"event": "start"}, {"event": "summary"}]

    halting = tmp_path / "logs" / f"halting_{json_logger.today}.jsonl"
    assert len(halting.read_text().splitlines()) == 2
    assert (tmp_path / "logs" / f"abandoned_{json_logger.today}.jsonl").read_text() == ""


def test_from_config(tmp_path):
    json_logger = JSONLogger.from_config({"output_directory": str(tmp_path), "log_file_prefix": "x_"})
    assert json_logger.current_log.endswith(f"x_{json_logger.today}.jsonl")


def test_console_message_tags_level(capsys):
    console_message("hello", level="WARNING")
    assert "[WARNING] hello" in capsys.readouterr().out
