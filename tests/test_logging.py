import json
import logging

from speech_relay.logging import setup_logging


def test_records_are_json_with_service_field(capsys, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    logger = setup_logging()

    logging.getLogger("speech_relay.test").debug("Upload received", extra={"size": 42})

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["message"] == "Upload received"
    assert record["levelname"] == "DEBUG"
    assert record["service"] == "speech-relay"
    assert record["size"] == 42
    assert logger.level == logging.DEBUG
    assert logging.getLogger("uvicorn.access").propagate is False
