"""Tests for logging helpers."""
import asyncio
import logging

import pytest

from seafshare import setup_logging
from seafshare.core.logging import get_logger
from seafshare.core.api import APIConfig, ShareSession
from seafshare.core.upload import UploadCoordinator


@pytest.fixture(autouse=True)
def restore_levels():
    """Restore seafshare logger levels after each test."""
    names = ['seafshare', 'seafshare.http', 'seafshare.upload.coordinator', 'seafshare.test']
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_get_logger_propagates():
    """Test loggers propagate to root."""
    logger = get_logger('seafshare.test')
    
    assert logger.name == 'seafshare.test'
    assert logger.propagate is True


def test_setup_logging_sets_levels():
    """Test setup_logging applies the level to package loggers."""
    setup_logging(logging.DEBUG)
    
    assert logging.getLogger('seafshare').level == logging.DEBUG
    assert logging.getLogger('seafshare.http').level == logging.DEBUG
    assert logging.getLogger('seafshare.upload.coordinator').level == logging.DEBUG


def test_password_not_logged(caplog, share_page, authenticated_page, upload_file_path, fake_transport):
    """Test the share password never appears in log records."""
    setup_logging(logging.DEBUG)
    transport = fake_transport(
        share_page,
        authenticated_page,
        '{"url": "https://cloud.example.org/seafhttp/upload-aj/x"}',
        '[{"name": "notes.txt", "id": "f00d", "size": 10}]',
    )
    
    with caplog.at_level(logging.DEBUG, logger='seafshare'):
        asyncio.run(UploadCoordinator(transport).upload("abc123", upload_file_path, "hunter2-secret"))
    
    assert caplog.records
    assert all("hunter2-secret" not in record.getMessage() for record in caplog.records)


def test_stage_transitions_logged_at_info(caplog, share_page, authenticated_page, upload_file_path, fake_transport):
    """Test every pipeline transition is an INFO record."""
    setup_logging(logging.INFO)
    transport = fake_transport(
        share_page,
        authenticated_page,
        '{"url": "https://cloud.example.org/seafhttp/upload-aj/x"}',
        '[{"name": "notes.txt", "id": "f00d", "size": 10}]',
    )
    
    with caplog.at_level(logging.INFO, logger='seafshare'):
        asyncio.run(UploadCoordinator(transport).upload("abc123", upload_file_path, "s3cret"))
    
    transitions = [
        record.getMessage() for record in caplog.records
        if record.name == 'seafshare.upload.coordinator' and record.levelno == logging.INFO
        and record.getMessage().startswith("Pipeline:")
    ]
    assert transitions == [
        "Pipeline: start -> page_fetched",
        "Pipeline: page_fetched -> form_token_extracted",
        "Pipeline: form_token_extracted -> password_submitted",
        "Pipeline: password_submitted -> session_id_extracted",
        "Pipeline: session_id_extracted -> upload_url_resolved",
        "Pipeline: upload_url_resolved -> uploaded",
    ]


def test_session_leaves_logger_levels_alone():
    """Test only setup_logging decides the package logger levels."""
    setup_logging(logging.ERROR)
    
    ShareSession("abc123", APIConfig())
    
    assert logging.getLogger('seafshare.http').level == logging.ERROR
    assert not hasattr(APIConfig(), 'log_level')
