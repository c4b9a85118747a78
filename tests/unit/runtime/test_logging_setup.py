"""Tests for the loguru setup."""

import json
import logging

from loguru import logger

from crm_api.api.utils.app_startup import configure_logging
from crm_api.runtime.config.config_data import ConfigData, LoggingConfig
from crm_api.runtime.context import with_context


def test_file_sink_receives_loguru_and_stdlib_records(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    override = ConfigData(logging=LoggingConfig(level="INFO", format="json", file=str(log_file)))

    try:
        with with_context(override):
            configure_logging()

        logger.bind(channel="audit").info("customers.create")
        logging.getLogger("some.library").warning("from stdlib")
        logger.complete()

        records = [json.loads(line)["record"] for line in log_file.read_text().splitlines()]
        messages = [record["message"] for record in records]
        assert "customers.create" in messages
        assert "from stdlib" in messages
        assert all("request_id" in record["extra"] for record in records)
    finally:
        configure_logging()
